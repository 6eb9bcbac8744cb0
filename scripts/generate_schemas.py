"""Generate JSON schemas for the element field catalog and save to schemas/ directory."""

import json
from pathlib import Path

from editorcheck.kernel.catalog import default_catalog
from editorcheck.kernel.fields import field_key


def generate_schemas(schemas_dir: Path = Path(__file__).parent.parent / "schemas"):
    """Generate one JSON schema per catalog field."""
    schemas_dir.mkdir(exist_ok=True)

    catalog = default_catalog()
    for field in catalog:
        schema = catalog.validator_for(field).json_schema()
        schema_path = schemas_dir / f"{field_key(field)}.schema.json"
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(schema, f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
