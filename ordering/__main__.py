from ordering.main import main

raise SystemExit(main())
