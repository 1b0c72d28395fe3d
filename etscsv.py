"""ETS CSV Export — Main Entry Point.

Turns a hierarchical KNX group address overview (JSON or YAML, as produced
by the group address generator) into the CSV file ETS imports, or serves
the same export over HTTP.

    python etscsv.py export overview.json --project-name "Woning Jansen"
    python etscsv.py serve --port 9091

Configuration comes from config.yaml (path in ETSCSV_CONFIG) with
environment overrides:
  - ETSCSV_API_PORT   API port for `serve`
  - ETSCSV_OUTPUT_DIR directory `export` writes to
  - ETSCSV_LOG_LEVEL  logging level name
"""

import argparse
import copy
import json
import logging
import os
import sys

import yaml
from pydantic import ValidationError

logger = logging.getLogger("etscsv")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

DEFAULT_CONFIG = {
    "api": {"host": "0.0.0.0", "port": 9091},
    "export": {
        "default_project_name": "Project",
        "default_locale": "nl",
        "output_dir": ".",
    },
    "logging": {"level": "INFO"},
}


def merge_config(overrides: dict | None) -> dict:
    """Return DEFAULT_CONFIG with the known sections of overrides applied."""
    merged = copy.deepcopy(DEFAULT_CONFIG)
    for section, values in (overrides or {}).items():
        if section in merged and isinstance(values, dict):
            merged[section].update(values)
    return merged


def load_config(path: str | None = None) -> dict:
    """Load config.yaml and apply environment overrides.

    A missing file is not an error; defaults are used.
    """
    if path is None:
        path = os.environ.get("ETSCSV_CONFIG") or os.path.join(
            os.path.dirname(os.path.abspath(__file__)), "config.yaml"
        )

    data = {}
    if os.path.exists(path):
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config {path} must be a mapping, got {type(data).__name__}")

    config = merge_config(data)

    if os.environ.get("ETSCSV_API_PORT"):
        config["api"]["port"] = int(os.environ["ETSCSV_API_PORT"])
    if os.environ.get("ETSCSV_OUTPUT_DIR"):
        config["export"]["output_dir"] = os.environ["ETSCSV_OUTPUT_DIR"]
    if os.environ.get("ETSCSV_LOG_LEVEL"):
        config["logging"]["level"] = os.environ["ETSCSV_LOG_LEVEL"]

    return config


def configure_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def read_overview_document(path: str) -> dict:
    """Read a JSON or YAML overview document.

    Accepts either a bare overview ({"mainGroups": [...]}) or an export
    request ({"projectName": ..., "overview": {...}}).
    """
    with open(path, encoding="utf-8") as f:
        if path.lower().endswith((".yaml", ".yml")):
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain an overview object")
    if "overview" in data:
        return data
    return {"overview": data}


def run_export(args, config: dict) -> int:
    """Write <projectName>-ets.csv for the given overview file."""
    from core.exporter import export_ets_csv

    try:
        document = read_overview_document(args.overview)
        project_name = (
            args.project_name
            or document.get("projectName")
            or config["export"]["default_project_name"]
        )
        locale = args.locale or document.get("locale") or config["export"]["default_locale"]
        result = export_ets_csv(document["overview"], project_name=project_name, locale=locale)
    except (OSError, ValueError, yaml.YAMLError, ValidationError) as e:
        logger.error("Cannot export %s: %s", args.overview, e)
        return 1

    output_dir = args.output_dir or config["export"]["output_dir"]
    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, result.filename)
    with open(output_path, "wb") as f:
        f.write(result.content)

    logger.info("Wrote %s (%d rows)", output_path, result.row_count)
    return 0


def run_server(args, config: dict) -> int:
    """Run the export API under uvicorn until interrupted."""
    import uvicorn

    from api.app import create_app

    port = args.port or config["api"]["port"]
    app = create_app(config)
    logger.info("Export API: http://%s:%d", config["api"]["host"], port)
    uvicorn.run(app, host=config["api"]["host"], port=port, log_level="info", access_log=False)
    return 0


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export KNX group address overviews as ETS-importable CSV"
    )
    parser.add_argument("--config", help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command", required=True)

    export = sub.add_parser("export", help="Write <projectName>-ets.csv from an overview file")
    export.add_argument("overview", help="Overview JSON/YAML file")
    export.add_argument("--project-name", help="Project name used for the file name")
    export.add_argument("--locale", help="Language the names were generated in")
    export.add_argument("--output-dir", help="Directory for the CSV file")

    serve = sub.add_parser("serve", help="Run the HTTP export API")
    serve.add_argument("--port", type=int, help="API port")

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    configure_logging(config["logging"]["level"])

    if args.command == "export":
        return run_export(args, config)
    return run_server(args, config)


if __name__ == "__main__":
    sys.exit(main())
