"""Write the generated document and its Swagger UI page.

Produces <output_dir>/swagger.json and <output_dir>/index.html.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
SPEC_FILENAME = "swagger.json"
INDEX_FILENAME = "index.html"


def write_document(document: dict[str, Any], output_dir: Path) -> Path:
    """Serialize the document to swagger.json, keeping key order."""
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / SPEC_FILENAME
    output_path.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote %s", output_path)
    return output_path


def render_index(
    document: dict[str, Any],
    output_dir: Path,
    spec_file: str = SPEC_FILENAME,
) -> Path:
    """Render the Swagger UI page that loads ``spec_file``."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=True,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    template = env.get_template("index.html.j2")
    output = template.render(
        title=document.get("info", {}).get("title", "API"),
        spec_file=spec_file,
    )

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / INDEX_FILENAME
    output_path.write_text(output, encoding="utf-8")
    logger.debug("Wrote %s", output_path)
    return output_path


def generate(document: dict[str, Any], output_dir: Path, ui: bool = True) -> list[Path]:
    """Write swagger.json and, unless ``ui`` is False, index.html."""
    written = [write_document(document, output_dir)]
    if ui:
        written.append(render_index(document, output_dir))
    return written
