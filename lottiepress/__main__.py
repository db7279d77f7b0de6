from lottiepress.cli import main


raise SystemExit(main())
