"""Two-plan savings comparison and its preset templates."""

import logging
from dataclasses import asdict, replace

from fastapi import APIRouter, HTTPException

from src.api.deps import resolve_region
from src.api.routes.comparison import issue_response
from src.api.schemas import (
    GrowthScenarioSchema,
    GrowthYearResponse,
    ScenarioCompareRequest,
    ScenarioCompareResponse,
    ScenarioTemplateResponse,
)
from src.engine.investment import compare_scenarios
from src.engine.validation import has_errors, validate_growth_scenario, validate_scenario_name
from src.models.inputs import GrowthScenario
from src.scenarios.templates import TEMPLATES, ScenarioTemplate, UnknownTemplateError, get_template

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


def _template_response(template: ScenarioTemplate) -> ScenarioTemplateResponse:
    return ScenarioTemplateResponse(
        id=template.id,
        name=template.name,
        description=template.description,
        scenario_a=GrowthScenarioSchema(**asdict(template.scenario_a)),
        scenario_b=GrowthScenarioSchema(**asdict(template.scenario_b)),
    )


def _lookup_template(template_id: str) -> ScenarioTemplate:
    try:
        return get_template(template_id)
    except UnknownTemplateError as e:
        raise HTTPException(status_code=404, detail=str(e.args[0]))


@router.get("/templates", response_model=list[ScenarioTemplateResponse])
async def list_templates():
    return [_template_response(t) for t in TEMPLATES.values()]


@router.get("/templates/{template_id}", response_model=ScenarioTemplateResponse)
async def template_detail(template_id: str):
    return _template_response(_lookup_template(template_id))


@router.post("/compare", response_model=ScenarioCompareResponse)
async def compare(req: ScenarioCompareRequest):
    """Grow two plans side by side. Explicit plans override the template's."""
    region = resolve_region(req.region)

    scenario_a = scenario_b = None
    if req.template_id is not None:
        template = _lookup_template(req.template_id)
        scenario_a, scenario_b = template.scenario_a, template.scenario_b
    if req.scenario_a is not None:
        scenario_a = GrowthScenario(**req.scenario_a.model_dump())
    if req.scenario_b is not None:
        scenario_b = GrowthScenario(**req.scenario_b.model_dump())
    if scenario_a is None or scenario_b is None:
        raise HTTPException(
            status_code=422,
            detail="scenario_a and scenario_b are required unless template_id is given",
        )

    issues = []
    for prefix, scenario in (("scenario_a", scenario_a), ("scenario_b", scenario_b)):
        issues.extend(
            replace(issue, field=f"{prefix}.{issue.field}")
            for issue in validate_growth_scenario(scenario)
        )
    if req.name is not None:
        name_issue = validate_scenario_name(req.name)
        if name_issue is not None:
            issues.append(name_issue)
    if has_errors(issues):
        logger.info("Rejected scenario comparison: %d validation issue(s)", len(issues))
        raise HTTPException(
            status_code=422,
            detail={"issues": [issue_response(i).model_dump() for i in issues]},
        )

    result = compare_scenarios(scenario_a, scenario_b, region.currency.symbol)

    return ScenarioCompareResponse(
        name=req.name,
        currency_symbol=region.currency.symbol,
        scenario_a=[GrowthYearResponse(**asdict(row)) for row in result.scenario_a],
        scenario_b=[GrowthYearResponse(**asdict(row)) for row in result.scenario_b],
        difference=result.difference,
        summary=result.summary,
    )
