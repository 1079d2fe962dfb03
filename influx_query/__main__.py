from influx_query.cli import main

raise SystemExit(main())
