from scriptwiki.main import main

raise SystemExit(main())
