"""
Location: python/x402check/check.py

Summary:
    The one-call entry point: extract a config from an HTTP response,
    validate it, and summarize each payment option with registry names.

Usage:
    The summary is built from the normalized config even when validation
    fails, so a partially broken config still shows what it asks for.

Example:
    from x402check import check

    result = check({"body": config, "headers": {}})
    for option in result.summary:
        print(option.network_name, option.display_amount, option.asset_symbol)
"""

from decimal import Decimal, localcontext
from typing import Any, Optional

from .detection import is_record
from .extraction import ResponseLike, extract_config
from .registries import get_asset_info, get_network_info
from .types import CheckResult, CheckSummary
from .validator import OptionsLike, validate


# Amounts above this with no registry decimals are assumed to be 6-decimal
# micro-units. Only a fallback: tokens with other decimals display wrongly.
MICRO_UNIT_THRESHOLD = 1000
MICRO_UNIT_DECIMALS = 6


def format_display_amount(amount: Any, decimals: Optional[int] = None) -> Optional[str]:
    """
    Convert an atomic-unit amount to whole tokens for display.

    Args:
        amount: Amount string in atomic units
        decimals: Token decimals from the registry, if known

    Returns:
        Plain decimal string such as "1.5", or None if amount is not a
        digit string
    """
    if not isinstance(amount, str) or not amount.isascii() or not amount.isdigit():
        return None

    # Precision covers every digit of amount so scaling stays exact
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(amount))
        value = Decimal(amount)
        if decimals is not None:
            value = value.scaleb(-decimals)
        elif value > MICRO_UNIT_THRESHOLD:
            value = value.scaleb(-MICRO_UNIT_DECIMALS)
        return format(value.normalize(), "f")


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def build_summary(normalized: Optional[dict[str, Any]]) -> list[CheckSummary]:
    """Summarize every object entry of normalized["accepts"]."""
    if normalized is None or not isinstance(normalized.get("accepts"), list):
        return []

    summary = []
    for index, entry in enumerate(normalized["accepts"]):
        if not is_record(entry):
            continue

        network = _text(entry.get("network"))
        asset = _text(entry.get("asset"))
        amount = _text(entry.get("amount"))
        network_info = get_network_info(network)
        asset_info = get_asset_info(network, asset)

        summary.append(CheckSummary(
            index=index,
            network=network,
            network_name=network_info.name if network_info else network,
            network_type=network_info.type if network_info else None,
            asset=asset,
            asset_symbol=asset_info.symbol if asset_info else None,
            asset_decimals=asset_info.decimals if asset_info else None,
            scheme=_text(entry.get("scheme")),
            pay_to=_text(entry.get("payTo")),
            amount=amount,
            display_amount=format_display_amount(
                amount, asset_info.decimals if asset_info else None
            ),
        ))
    return summary


def check(response: ResponseLike, options: OptionsLike = None) -> CheckResult:
    """
    Extract, validate and summarize the x402 config in a response.

    Args:
        response: httpx.Response or {"body": ..., "headers": ...}
        options: ValidationOptions or a mapping such as {"strict": True}

    Returns:
        CheckResult. When no config is found, extracted is False,
        extraction_error explains why, and every other field is empty.
    """
    extraction = extract_config(response)
    if extraction.config is None:
        return CheckResult(
            extracted=False,
            source=None,
            extraction_error=extraction.error,
            valid=False,
            version="unknown",
            errors=[],
            warnings=[],
            normalized=None,
            summary=[],
            raw=None,
        )

    result = validate(extraction.config, options)
    return CheckResult(
        extracted=True,
        source=extraction.source,
        extraction_error=None,
        valid=result.valid,
        version=result.version,
        errors=result.errors,
        warnings=result.warnings,
        normalized=result.normalized,
        summary=build_summary(result.normalized),
        raw=extraction.config,
    )
