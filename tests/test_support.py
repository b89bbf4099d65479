from __future__ import annotations

import base64
import io
import os
from contextlib import contextmanager
from datetime import date
from typing import Any
from unittest import mock

from PIL import Image

from inception_report.core.models import ReportOptions
from inception_report.render.context import LayoutContext, new_surface, page_geometry
from inception_report.render.primitives import new_page

# =============================================================================
# Test Constants
# =============================================================================

TEST_DATE = date(2024, 5, 1)
TEST_WORKSHOP = "Checkout Revamp"


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


# =============================================================================
# Layout Builders
# =============================================================================


def make_options(*, paper: str = "A4", brand: str = "Lean Inception") -> ReportOptions:
    return ReportOptions(brand_name=brand, report_date=TEST_DATE, paper_size=paper)


def make_context(*, paper: str = "A4", brand: str = "Lean Inception") -> LayoutContext:
    """A layout context with one page open and the cursor at the content top."""
    geometry = page_geometry(paper)
    options = make_options(paper=paper, brand=brand)
    ctx = LayoutContext(
        pdf=new_surface(geometry),
        options=options,
        workshop_name=TEST_WORKSHOP,
        geometry=geometry,
        header_date=options.header_date(),
    )
    new_page(ctx)
    return ctx


# =============================================================================
# Report Builders
# =============================================================================


def make_template(name: str, step: int, content: Any = None) -> dict[str, Any]:
    return {"name": name, "stepNumber": step, "content": content if content is not None else {}}


def make_report(*templates: dict[str, Any], title: str = "Workshop Report") -> dict[str, Any]:
    return {
        "title": title,
        "workshopName": TEST_WORKSHOP,
        "templates": list(templates),
        "metadata": {
            "status": "Completed",
            "stepsSummary": f"{len(templates)} of {len(templates)}",
            "generatedAt": "01/05/2024 10:00",
            "participants": ["Ana", "Bruno", "Carla"],
        },
    }


def png_data_uri(size: tuple[int, int] = (4, 2), color: str = "red") -> str:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buffer.getvalue()).decode("ascii")
