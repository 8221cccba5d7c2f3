"""List the trait category taxonomy."""

import cyclopts

from persona.cli.console import get_console
from persona.domain.catalog.model.category import CATEGORY_CATALOG

app = cyclopts.App(name="categories", help="Show trait categories")


@app.default
def show() -> None:
    """Print every category with its label and description."""
    get_console().table(
        [c.model_dump() for c in CATEGORY_CATALOG],
        [("value", "Value"), ("label", "Label"), ("description", "Description")],
        title="Trait categories",
    )
