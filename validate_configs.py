import sys
from pathlib import Path
from gtestwizard.config.parser import parse_config
from gtestwizard.core.exceptions import ConfigError


def validate_all():
    base_path = Path("examples")
    config_files = sorted(base_path.glob("*.yaml"))

    if not config_files:
        print("No configuration files found!")
        sys.exit(1)

    print(f"Found {len(config_files)} configuration files.")

    has_errors = False
    for config_file in config_files:
        try:
            parse_config(config_file)
            print(f"✅ {config_file.name}")
        except ConfigError as e:
            print(f"❌ {config_file.name}: {e}")
            has_errors = True

    if has_errors:
        sys.exit(1)
    else:
        print("\nAll configurations valid!")


if __name__ == "__main__":
    validate_all()
