# MIT License © 2025 Motohiro Suzuki
from textsig.cli import main

raise SystemExit(main())
