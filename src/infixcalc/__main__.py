from infixcalc.cli import main

raise SystemExit(main())
