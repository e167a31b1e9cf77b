from src.demo.cli import main

raise SystemExit(main())
