import sys
from pathlib import Path

# Ensure project root is on sys.path so "import analise_vendas" works without installing
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))
from analise_vendas.report_export import main

if __name__ == "__main__":
    sys.exit(main())
