#!/usr/bin/env python3
"""Validate every symbol override in config/symbols.yaml against the defaults."""

import sys
from pathlib import Path
from typing import List

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from equity_signals.config.loader import ConfigLoader
from equity_signals.config.validation import ConfigValidator, ValidationError


def validate_symbol_config(loader: ConfigLoader, symbol: str) -> List[ValidationError]:
    """Validate the merged configuration for a single symbol."""
    config = loader.merge_config(symbol)
    return ConfigValidator.validate_config(config)


def configured_symbols(loader: ConfigLoader) -> List[str]:
    symbols_file = loader.config_dir / "symbols.yaml"
    if not symbols_file.exists():
        return []
    with open(symbols_file, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return sorted((data.get("symbols") or {}).keys())


def main():
    loader = ConfigLoader.create(project_root / "config")

    # Unknown symbols fall back to pure defaults
    symbols = configured_symbols(loader) + ["UNKNOWN.NS"]
    all_valid = True

    for symbol in symbols:
        errors = validate_symbol_config(loader, symbol)
        if errors:
            print(f"{symbol}: {len(errors)} validation error(s)")
            for error in errors:
                print(f"  - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"{symbol}: ok")

    sys.exit(0 if all_valid else 1)


if __name__ == "__main__":
    main()
