"""
Conversion Script: Menu document (.docx) to delimited nutrition table

Reads the menu tables of the document named in config/menu.yaml,
parses foods, allergens and nutrient values of every cell, and writes
one line per cell to the configured output file.

Usage:
    python convert_menu.py                       # config/menu.yaml
    python convert_menu.py path/to/other.yaml    # explicit config file
"""

from menu_nutrition.api import MenuPipeline
from menu_nutrition.config import load_config
from menu_nutrition.parsers import MenuDocumentError
from pydantic import ValidationError
from datetime import datetime
import sys


def main() -> int:
    print("=" * 80)
    print("MENU CONVERSION: Food & nutrient tables -> delimited text")
    print("=" * 80)

    # === Step 1: Load Configuration ===
    print("\n[Step 1] Loading configuration...")
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    try:
        config = load_config(config_path)
    except FileNotFoundError as e:
        print(f"  ✗ Configuration file not found!")
        print(f"    Error: {e}")
        return 1
    except ValidationError as e:
        print(f"  ✗ Configuration file is malformed!")
        print(f"    Error: {e}")
        return 1
    print(f"  ✓ Config loaded from {config.config_path}")
    print(f"    - Input: {config.input_path}")
    print(f"    - Output: {config.output_path}")
    print(f"    - Delimiter: '{config.delimiter}'")
    print(f"    - Row filter: '{config.row_filter or '(none)'}'")
    print(f"    - Workers: {config.max_workers}")

    # === Step 2: Convert ===
    print("\n[Step 2] Converting menu document...")
    pipeline = MenuPipeline(config=config)
    start_time = datetime.now()

    try:
        stats = pipeline.run()
    except FileNotFoundError as e:
        print(f"  ✗ Input document not found!")
        print(f"    Error: {e}")
        return 1
    except MenuDocumentError as e:
        print(f"  ✗ Input document could not be read!")
        print(f"    Error: {e}")
        print()
        print("  Please ensure the input is a .docx file containing the menu tables.")
        return 1

    elapsed = (datetime.now() - start_time).total_seconds()

    # === Step 3: Display Results ===
    print("\n" + "=" * 80)
    print("CONVERSION COMPLETE")
    print("=" * 80)
    print()
    print(f"⏱️  Total Time: {elapsed:.2f} seconds")
    print()
    print("📊 Statistics:")
    print(f"    ✓ Rows exported: {stats['rows']}")
    print(f"    ✓ Cells exported: {stats['cells']}")
    print(f"    ✓ Foods found: {stats['foods']}")
    print(f"    ✗ Cells without nutrient data: {stats['missing_nutrients']}")
    print()
    print(f"💾 Output written to {config.output_path}")
    print()
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
