#!/usr/bin/env python3
"""Test the request pipeline without HTTP"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import json
import uuid

from linechart.models import LinkResponse, MessageResponse, RenderPlan, RequestVariant
from linechart.service import LineChartService


def test_plan_for_sales_request(service):
    body = json.dumps(
        {"X_Start": 0, "X_End": 5, "Y_Points": [[{"Caption": "Sales", "Points": [10, 20, 30]}]]}
    )

    plan = service.plan(body, RequestVariant.SINGLE_ARRAY)

    assert isinstance(plan, RenderPlan)
    assert (plan.x_axis.minimum, plan.x_axis.maximum, plan.x_axis.tick_count) == (0, 5, 6)
    assert (plan.y_axis.minimum, plan.y_axis.maximum) == (10, 30)
    assert plan.lines[0].points == [(0, 30), (1, 20), (2, 10), (3, 0), (4, 0)]


def test_plan_rejection_returns_message(service):
    result = service.plan(b"[]", RequestVariant.DUAL_ARRAY)

    assert isinstance(result, MessageResponse)
    assert result.Message == "Invalid data sent. Please send a valid JSON-Object."


def test_render_uses_injected_identifier(settings, image_dir):
    fixed = uuid.UUID("0f0e0d0c-0b0a-4908-8706-050403020100")
    service = LineChartService(settings, id_factory=lambda: fixed)
    body = json.dumps({"X_Start": 0, "X_End": 3, "Y_Points": [[{"Caption": "A", "Points": [1, 2, 3]}]]})

    response = service.render(body, RequestVariant.SINGLE_ARRAY)

    assert isinstance(response, LinkResponse)
    assert response.Link.endswith(f"/line/result/{fixed}.png")
    assert (image_dir / f"{fixed}.png").exists()
    assert service.retrieve(str(fixed)).Data


def test_jpeg_output(settings, image_dir):
    settings.render.image_format = "jpg"
    service = LineChartService(settings)
    body = json.dumps({"X_Start": 0, "X_End": 2, "Y_Points": [[{"Caption": "A", "Points": [1, 2]}]]})

    link = service.render(body, RequestVariant.SINGLE_ARRAY).Link

    assert link.endswith(".jpg")
    assert len(list(image_dir.glob("*.jpg"))) == 1
