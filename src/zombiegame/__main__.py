from zombiegame.demo import main

raise SystemExit(main())
