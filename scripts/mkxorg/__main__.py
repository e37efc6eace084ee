from mkxorg.xorg.cli import main

raise SystemExit(main())
