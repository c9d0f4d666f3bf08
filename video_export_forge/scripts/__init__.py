"""RU: Реализации CLI-скриптов.

Их можно запускать через `python -m video_export_forge.scripts.<module>` или
через entrypoint пакета `video-export-forge`.

EN: CLI script implementations.

They can be invoked via `python -m video_export_forge.scripts.<module>` or
through the `video-export-forge` package entrypoint.
"""
