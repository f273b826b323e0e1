from pathlib import Path

# Repo-root conventional directories/files (overrideable via settings.yaml / env)
CONFIG_DIR = Path("configs")
SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

DATA_DIR = Path("data")
TAXONOMY_FILE = DATA_DIR / "taxonomy.txt"

OUTPUT_DIR = Path("outputs")

# Environment variable overrides
ENV_TAXONOMY_FILE = "STYLEGUIDE_TAXONOMY_FILE"
ENV_OUTPUT_DIR = "STYLEGUIDE_OUTPUT_DIR"
