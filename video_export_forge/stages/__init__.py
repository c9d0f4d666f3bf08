"""RU: Стадии синтеза плана экспорта.

`filter_stage` строит цепочку видеофильтров, `video_stage` собирает команды
для видео и обложки, `progress_stage` переводит время FFmpeg в прогресс.

EN: Export plan synthesis stages.

`filter_stage` builds the video filter chain, `video_stage` assembles video
and cover commands, `progress_stage` maps FFmpeg time to progress.
"""
