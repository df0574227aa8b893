"""Script to generate openapi.yaml for the API and save it for inspection."""
import argparse
import yaml
from pathlib import Path
from app.core.config import Settings
from app.main import create_app


def build_openapi() -> dict:
    # The schema does not depend on the database; an in-memory URL avoids touching disk.
    app = create_app(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    return app.openapi()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", default=str(Path(__file__).parent.parent / "openapi.yaml"))
    args = parser.parse_args()

    output = Path(args.output)
    output.write_text(yaml.safe_dump(build_openapi(), sort_keys=False), encoding="utf-8")

    print("=" * 60)
    print("OPENAPI.YAML GENERATION")
    print("=" * 60)
    print("Generated file location:")
    print(f"  {output.absolute()}")


if __name__ == "__main__":
    main()
