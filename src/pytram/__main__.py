from pytram.cli import main

raise SystemExit(main())
