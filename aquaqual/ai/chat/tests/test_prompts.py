"""Tests for system prompt composition."""

from aquaqual.ai.chat.prompts import build_system_prompt, format_neighborhood_context
from aquaqual.config import PromptTemplate


def test_generic_prompt_has_no_neighborhood_context():
    prompt = build_system_prompt()

    assert prompt.startswith("You are a South Florida climate risk specialist")
    assert "FORMATTING GUIDELINES:" in prompt
    assert "RESPONSE STYLE:" in prompt
    assert "TECHNICAL ACCURACY:" in prompt
    assert "SPECIFIC NEIGHBORHOOD CONTEXT" not in prompt


def test_prompt_contains_every_climate_parameter(brickell):
    prompt = build_system_prompt(neighborhood=brickell)

    for value in brickell.climate_parameters.model_dump().values():
        assert value in prompt
    assert "Name: Brickell" in prompt
    assert f"Description: {brickell.description}" in prompt
    assert f"Overall Vulnerability: {brickell.vulnerability}" in prompt
    assert f"Recommended Solutions: {brickell.solutions}" in prompt
    assert prompt.endswith(
        "tailor solutions to this neighborhood's characteristics."
    )


def test_prompt_is_deterministic(brickell):
    assert build_system_prompt(neighborhood=brickell) == build_system_prompt(
        neighborhood=brickell
    )


def test_templates_share_guidelines_and_context(brickell):
    specialist = build_system_prompt(
        PromptTemplate.SOUTH_FLORIDA_SPECIALIST, brickell
    )
    advisor = build_system_prompt(PromptTemplate.RESILIENCE_ADVISOR, brickell)

    assert specialist != advisor
    assert advisor.startswith("You are a climate resilience advisor")
    context = format_neighborhood_context(brickell)
    assert specialist.endswith(context)
    assert advisor.endswith(context)


def test_field_values_are_interpolated_verbatim(record_factory):
    record = record_factory("{name} <b>Grove</b>")

    prompt = build_system_prompt(neighborhood=record)

    assert "Name: {name} <b>Grove</b>" in prompt
