"""MCP Server - Tool definitions for Claude integration.

Exposes the macro calculator as MCP tools. Tools validate raw arguments with
the core validator and never raise on bad user input; they return an error
payload instead.
"""

import logging

from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from ..core.labels import LABELS, describe_options, error_message, format_result, is_supported_language
from ..core.macros import compute
from ..core.validation import InputValidationError, parse_calculation_input
from .config import load_server_config


logger = logging.getLogger(__name__)

config = load_server_config()

# Configure transport security for the allowed Host headers
transport_security = TransportSecuritySettings(
    enable_dns_rebinding_protection=True,
    allowed_hosts=config.mcp_allowed_hosts,
)

# Stateless HTTP: every tool call is independent
mcp = FastMCP(
    "bodyfuel",
    instructions="""BodyFuel - Daily calorie and macro calculator.

Use these tools to work out a user's daily calorie, protein, fat and carb
targets from their sex, age, height (cm), weight (kg), activity level and goal.

Call list_options first if you need the allowed values or ranges.
Show the user the text field of the calculate_macros result.""",
    stateless_http=True,
    transport_security=transport_security,
)


def run_calculation(
    age: str | int | float,
    height_cm: str | float,
    weight_kg: str | float,
    sex: str | None = None,
    activity: str | None = None,
    goal: str | None = None,
    lang: str = "en",
) -> dict:
    """Validate raw input and compute targets.

    Shared by the MCP tool and the HTTP endpoint.

    Returns:
        Dictionary with input, result and text, or error and field
    """
    if not is_supported_language(lang):
        return {"error": f"Unsupported language '{lang}'. Use one of: {', '.join(LABELS)}.", "field": "lang"}

    try:
        calc_input = parse_calculation_input(
            age=age,
            height_cm=height_cm,
            weight_kg=weight_kg,
            sex=sex,
            activity=activity,
            goal=goal,
        )
    except InputValidationError as e:
        logger.info("Rejected calculation input (%s): %s", e.field, e.message)
        return {"error": error_message(e.code, e.message, lang), "field": e.field}

    result = compute(calc_input)
    logger.debug("Computed targets: %s", result)

    return {
        "input": calc_input.model_dump(mode="json"),
        "result": result.model_dump(),
        "text": format_result(result, lang),
    }


# ==================== Calculator Tools ====================


@mcp.tool()
def calculate_macros(
    age: int | float | str,
    height_cm: float | str,
    weight_kg: float | str,
    sex: str = "male",
    activity: str = "medium",
    goal: str = "maintain",
    lang: str = "en",
) -> dict:
    """Calculate daily calorie and macronutrient targets.

    Uses Mifflin-St Jeor BMR, an activity multiplier and a goal adjustment,
    with a 1200 kcal floor. Protein is 2 g/kg, fat 1 g/kg, carbs fill the rest.

    Args:
        age: Age in whole years (10-80)
        height_cm: Height in centimeters (120-230)
        weight_kg: Weight in kilograms (30-200)
        sex: "male" or "female"
        activity: "low", "medium" or "high"
        goal: "cut", "maintain" or "bulk"
        lang: Label language for the text summary ("en" or "ar")

    Returns:
        Result with calories, protein_grams, fat_grams, carb_grams and a text
        summary, or an error message
    """
    payload = run_calculation(
        age=age,
        height_cm=height_cm,
        weight_kg=weight_kg,
        sex=sex,
        activity=activity,
        goal=goal,
        lang=lang,
    )
    if "error" in payload:
        return payload

    return {"result": payload["result"], "text": payload["text"]}


@mcp.tool()
def list_options(lang: str = "en") -> dict:
    """List allowed values, labels, defaults and ranges for every input.

    Args:
        lang: Label language ("en" or "ar")

    Returns:
        Dictionary describing each input field, or an error message
    """
    if not is_supported_language(lang):
        return {"error": f"Unsupported language '{lang}'. Use one of: {', '.join(LABELS)}."}
    return describe_options(lang)
