from video_export_forge.cli import main

raise SystemExit(main())
