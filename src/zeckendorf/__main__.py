from zeckendorf.cli import main

raise SystemExit(main())
