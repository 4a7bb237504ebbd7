"""Default dimension derivation from the invoked function ARN.

The expected ARN shapes are::

    arn:aws:lambda:<region>:<account>:function:<name>
    arn:aws:lambda:<region>:<account>:function:<name>:<qualifier>
    arn:aws:lambda:<region>:<account>:event-source-mappings:<uuid>

Any other string is tolerated. Problems are reported as diagnostics and only
the affected dimension is omitted.
"""

METRIC_SOURCE = "lambda_wrapper"

FUNCTION_RESOURCE = "function"
EVENT_SOURCE_MAPPINGS_RESOURCE = "event-source-mappings"

_REGION_INDEX = 3
_ACCOUNT_INDEX = 4
_RESOURCE_TYPE_INDEX = 5
_RESOURCE_NAME_INDEX = 6
_QUALIFIER_INDEX = 7
_MIN_SEGMENTS = 6


def _segment(tokens: list[str], index: int) -> str:
    """Return the ARN segment at index, or an empty string if absent."""
    if index < len(tokens):
        return tokens[index]
    return ""


def _function_arn(
    tokens: list[str],
    function_version: str,
    dimensions: dict[str, str],
    diagnostics: list[str],
) -> str:
    """Build the canonical function ARN, qualified by the running version."""
    if len(tokens) == _QUALIFIER_INDEX + 1:
        dimensions["aws_function_qualifier"] = tokens[_QUALIFIER_INDEX]
        return ":".join([*tokens[:_QUALIFIER_INDEX], function_version])
    if len(tokens) == _QUALIFIER_INDEX:
        return ":".join([*tokens, function_version])
    diagnostics.append(
        f"unexpected function ARN length {len(tokens)}, using it unchanged"
    )
    return ":".join(tokens)


def derive_dimensions(
    identifier: str,
    function_version: str,
    function_name: str,
    execution_env: str | None = None,
) -> tuple[dict[str, str], list[str]]:
    """Derive the default dimensions for one invocation.

    Args:
        identifier: Invoked function ARN (any string is accepted).
        function_version: Version of the running function.
        function_name: Name of the running function.
        execution_env: Optional execution environment marker, copied verbatim.

    Returns:
        Tuple of (dimensions, diagnostics). The dimensions always contain
        metric_source, aws_function_version and aws_function_name.
    """
    dimensions = {
        "metric_source": METRIC_SOURCE,
        "aws_function_version": function_version,
        "aws_function_name": function_name,
    }
    diagnostics: list[str] = []
    if execution_env:
        dimensions["aws_execution_env"] = execution_env

    tokens = identifier.split(":")

    for index, name in ((_REGION_INDEX, "aws_region"), (_ACCOUNT_INDEX, "aws_account_id")):
        value = _segment(tokens, index)
        if value:
            dimensions[name] = value
        else:
            diagnostics.append(f"missing {name} (segment {index}) in {identifier!r}")

    if len(tokens) < _MIN_SEGMENTS:
        diagnostics.append(f"invalid identifier shape: {identifier!r}")
        return dimensions, diagnostics

    resource_type = tokens[_RESOURCE_TYPE_INDEX]
    if resource_type == FUNCTION_RESOURCE:
        dimensions["lambda_arn"] = _function_arn(
            tokens, function_version, dimensions, diagnostics
        )
    elif resource_type == EVENT_SOURCE_MAPPINGS_RESOURCE:
        dimensions["lambda_arn"] = identifier
        mapping = _segment(tokens, _RESOURCE_NAME_INDEX)
        if mapping:
            dimensions["event_source_mappings"] = mapping
        else:
            diagnostics.append(f"missing event source mapping id in {identifier!r}")

    return dimensions, diagnostics
