"""System prompt templates for the climate chat."""

import textwrap

from aquaqual.config import PromptTemplate
from aquaqual.neighborhoods.schemas import NeighborhoodRecord

_GUIDELINES = textwrap.dedent(
    """\
    FORMATTING GUIDELINES:
    - Use clean, chat-friendly formatting without excessive line breaks
    - Keep risk percentages and measurements on the same line (e.g., "High – 40% chance" not "High\\n40% chance")
    - Use clear sections with proper spacing but avoid overly fragmented text
    - Present numerical data inline with descriptions
    - Use bullet points sparingly and only for clear action items

    RESPONSE STYLE:
    - Lead with the most critical risk information
    - Provide specific, actionable recommendations
    - Reference local South Florida conditions and regulations
    - Include realistic timelines and cost considerations when relevant
    - Mention relevant agencies (FEMA, SFWMD, local emergency management)

    TECHNICAL ACCURACY:
    - Base flood risk assessments on FEMA flood zones, historical data, and sea level rise projections
    - Reference current building codes (Florida Building Code, local ordinances)
    - Include insurance implications (NFIP rates, flood insurance requirements)
    - Consider compound risks (storm surge + rainfall, heat + flooding)"""
)

_INTRODUCTIONS = {
    PromptTemplate.SOUTH_FLORIDA_SPECIALIST: (
        "You are a South Florida climate risk specialist with expertise in flood "
        "modeling, urban planning, and resilience strategies. Your responses should be:"
    ),
    PromptTemplate.RESILIENCE_ADVISOR: (
        "You are a climate resilience advisor helping South Florida residents, "
        "homeowners, and community groups understand and prepare for climate "
        "hazards where they live. Your responses should be:"
    ),
}

_NEIGHBORHOOD_CONTEXT = textwrap.dedent(
    """\
    SPECIFIC NEIGHBORHOOD CONTEXT:
    Name: {name}
    Description: {description}
    Current Flood Risk: {flood_risk}
    Storm Surge Potential: {storm_surge}
    Heat Risk: {heat_index}
    Sea Level Rise Projection: {sea_level_rise}
    Precipitation Trends: {precipitation_trends}
    Wind Risk: {wind_risk}
    Coastal Erosion: {coastal_erosion}
    Groundwater Intrusion: {groundwater_intrusion}
    Infrastructure Resilience: {infrastructure_resilience}
    Adaptation Cost Estimate: {adaptation_cost_estimate}
    Overall Vulnerability: {vulnerability}
    Recommended Solutions: {solutions}

    Use this data to provide specific, localized advice. Reference the exact risk levels and tailor solutions to this neighborhood's characteristics."""
)


def format_neighborhood_context(neighborhood: NeighborhoodRecord) -> str:
    """Render a neighborhood's data as a prompt block, values verbatim."""
    return _NEIGHBORHOOD_CONTEXT.format(
        name=neighborhood.name,
        description=neighborhood.description,
        vulnerability=neighborhood.vulnerability,
        solutions=neighborhood.solutions,
        **neighborhood.climate_parameters.model_dump(),
    )


def build_system_prompt(
    template: PromptTemplate = PromptTemplate.SOUTH_FLORIDA_SPECIALIST,
    neighborhood: NeighborhoodRecord | None = None,
) -> str:
    """Build the system prompt for one chat request.

    Args:
        template: Which introduction to open the prompt with
        neighborhood: Matched neighborhood whose data is appended, if any

    Returns:
        str: System prompt text
    """
    prompt = f"{_INTRODUCTIONS[template]}\n\n{_GUIDELINES}"
    if neighborhood is not None:
        prompt += f"\n\n{format_neighborhood_context(neighborhood)}"
    return prompt
