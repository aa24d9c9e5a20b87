import json
import math
from typing import Any, List, Optional, Tuple

from linechart.logger import ConsoleLogger, Logger
from linechart.models import ChartRequest, RequestVariant, Series
from linechart.validation import messages
from linechart.validation.models import FailureKind, ValidationResult

X_START_KEY = "X_Start"
X_END_KEY = "X_End"
CAPTION_KEY = "Caption"


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity literals, which are not valid JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def is_double(value: Any) -> bool:
    """True for JSON numbers representable as a finite double (bool excluded)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(float(value))
    except OverflowError:
        return False


class ChartRequestValidator:
    """
    Fail-fast validation of chart requests

    Gates run in a fixed order and the first violation ends validation, so a
    rejected request always carries exactly one diagnostic message. Per
    sub-object checks (caption, array types, numeric points) complete for one
    sub-object before the next one is looked at.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self.logger = logger or ConsoleLogger(name="validator")

    def validate_body(self, body: bytes | str, variant: RequestVariant) -> ValidationResult:
        """Parse a raw request body and validate it"""
        try:
            payload = json.loads(body, parse_constant=_reject_constant)
        except (ValueError, UnicodeDecodeError) as e:
            self.logger.debug("Request body is not JSON", error=str(e))
            return ValidationResult.fail(FailureKind.INVALID_JSON, messages.invalid_json())
        return self.validate(payload, variant)

    def validate(self, payload: Any, variant: RequestVariant) -> ValidationResult:
        """
        Validate an already parsed JSON value

        Args:
            payload: Parsed JSON document
            variant: Request layout that decides the key names

        Returns:
            ValidationResult holding either the ChartRequest or one failure
        """
        result = self._run_gates(payload, variant)
        if result.failure is not None:
            self.logger.info(
                "Request rejected",
                variant=variant.value,
                kind=result.failure.kind.value,
                category=result.failure.kind.category,
                key=result.failure.key,
            )
        else:
            self.logger.debug(
                "Request accepted", variant=variant.value, series=len(result.request.series)
            )
        return result

    def _run_gates(self, payload: Any, variant: RequestVariant) -> ValidationResult:
        points_key = variant.points_key

        if not isinstance(payload, dict) or not payload:
            return ValidationResult.fail(FailureKind.INVALID_JSON, messages.invalid_json())

        for key in (X_START_KEY, X_END_KEY, points_key):
            if key not in payload:
                return ValidationResult.fail(
                    FailureKind.MISSING_KEY, messages.missing_key(key), key=key
                )

        for key in (X_START_KEY, X_END_KEY):
            if not is_double(payload[key]):
                return ValidationResult.fail(
                    FailureKind.TYPE_MISMATCH, messages.not_a_double(key), key=key
                )

        outer = payload[points_key]
        if not isinstance(outer, list):
            return ValidationResult.fail(
                FailureKind.TYPE_MISMATCH, messages.not_an_array(points_key), key=points_key
            )
        if not outer:
            return ValidationResult.fail(
                FailureKind.EMPTY_ARRAY, messages.empty_array(points_key), key=points_key
            )
        if len(outer) > 1:
            return ValidationResult.fail(
                FailureKind.TOO_MANY_ARRAYS, messages.too_many_arrays(points_key), key=points_key
            )

        sub_objects = outer[0]
        if not isinstance(sub_objects, list) or not sub_objects:
            return ValidationResult.fail(
                FailureKind.MISSING_SUBOBJECTS,
                messages.missing_subobjects(points_key),
                key=points_key,
            )

        series: List[Series] = []
        for sub_object in sub_objects:
            checked = self._check_sub_object(sub_object, variant)
            if isinstance(checked, ValidationResult):
                return checked
            series.append(checked)

        request = ChartRequest(
            variant=variant,
            x_start=float(payload[X_START_KEY]),
            x_end=float(payload[X_END_KEY]),
            series=series,
        )
        return ValidationResult.ok(request)

    def _check_sub_object(self, sub_object: Any, variant: RequestVariant) -> Series | ValidationResult:
        points_key = variant.points_key

        if not isinstance(sub_object, dict):
            return ValidationResult.fail(
                FailureKind.MISSING_SUBOBJECTS,
                messages.improper_subobject(points_key),
                key=points_key,
            )

        caption = sub_object.get(CAPTION_KEY)
        if not isinstance(caption, str) or not caption:
            return ValidationResult.fail(
                FailureKind.EMPTY_CAPTION, messages.empty_caption(points_key), key=CAPTION_KEY
            )

        array_keys = [k for k in (variant.x_key, variant.y_key) if k is not None]
        for field in array_keys:
            if not isinstance(sub_object.get(field), list):
                return ValidationResult.fail(
                    FailureKind.TYPE_MISMATCH,
                    messages.field_not_an_array(field, points_key),
                    key=field,
                )

        values: dict[str, Tuple[float, ...]] = {}
        for field in array_keys:
            points = sub_object[field]
            if not all(is_double(point) for point in points):
                return ValidationResult.fail(
                    FailureKind.TYPE_MISMATCH,
                    messages.point_not_a_double(field, points_key),
                    key=field,
                )
            values[field] = tuple(float(point) for point in points)

        x_values = list(values[variant.x_key]) if variant.x_key is not None else None
        return Series(caption=caption, y_values=list(values[variant.y_key]), x_values=x_values)
