#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tai_app.config.loader import ConfigLoader
from tai_app.config.validation import ConfigValidator, ValidationError
from tai_app.docs import HelpService


def validate_config_dir(config_dir: Optional[Path] = None) -> List[ValidationError]:
    """Validate the merged configuration of one config directory."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.load())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating TAI configuration in {loader.config_dir}...")

    all_valid = True

    try:
        errors = validate_config_dir(config_dir)

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Configuration is valid")

    except Exception as e:
        print(f"❌ Error loading configuration: {e}")
        all_valid = False

    # The documentation table must load and resolve with these settings
    print("\n📋 Checking documentation table...")
    try:
        service = HelpService.from_config(loader.load())
        urls = service.help("all")
        print(f"✅ {len(urls)} indicators documented under {service.base_url}")
    except Exception as e:
        print(f"❌ Error loading documentation table: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
