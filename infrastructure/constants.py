from pathlib import Path

# Repo-root conventional directories/files (overrideable via CLI flags)
ENV_FILE = Path(".env")

# Environment variable naming a default spec file when --file is not given
TAINT_SPECS_FILE_ENV = "TAINT_SPECS_FILE"

# Spec file formats
YAML_SUFFIXES = (".yaml", ".yml")
TEXT_SUFFIXES = (".txt",)
