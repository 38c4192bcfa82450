from datetime import date
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from tool_rental import __version__
from tool_rental.engine.charge_calendar import holidays_for_year
from tool_rental.engine.formatting import format_agreement
from tool_rental.engine.models import Tool
from tool_rental.engine.money import round2
from tool_rental.exceptions import ValidationError
from tool_rental.api.state import engine

app = FastAPI(
    title="Tool Rental API",
    description="Checkout pricing for the tool rental counter",
    version=__version__
)

# Enable CORS for frontend development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CheckoutRequest(BaseModel):
    tool_code: str
    rental_days: int
    discount_percent: int
    checkout_date: date


def _tool_to_dict(tool: Tool) -> dict:
    return {
        "code": tool.code,
        "type": tool.type,
        "brand": tool.brand,
        "daily_charge": str(round2(tool.daily_charge)),
        "weekday_charge": tool.weekday_charge,
        "weekend_charge": tool.weekend_charge,
        "holiday_charge": tool.holiday_charge,
    }


@app.get("/")
async def root():
    return {"status": "online", "message": "Tool Rental API Active", "tools_loaded": len(engine.catalog)}


@app.get("/tools")
async def list_tools():
    return [_tool_to_dict(tool) for tool in engine.catalog]


@app.get("/tools/{tool_code}")
async def get_tool(tool_code: str):
    tool = engine.catalog.get(tool_code)
    if tool is None:
        raise HTTPException(status_code=404, detail=f"Invalid tool code: {tool_code}")
    return _tool_to_dict(tool)


@app.post("/tools/reload")
async def reload_tools():
    """Re-read the tool catalog file without restarting the server."""
    engine.reload_data()
    return {"status": "reloaded", "tools_loaded": len(engine.catalog), "codes": engine.catalog.codes()}


@app.post("/checkout")
async def checkout(req: CheckoutRequest):
    try:
        agreement = engine.checkout(
            tool_code=req.tool_code,
            rental_days=req.rental_days,
            discount_percent=req.discount_percent,
            checkout_date=req.checkout_date,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = agreement.to_dict()
    result["printout"] = format_agreement(agreement)
    result["trace"] = [
        {"step": t.step, "description": t.description, "value": t.value}
        for t in agreement.trace
    ]
    return result


@app.get("/holidays/{year}")
async def get_holidays(year: int):
    if year < 1 or year > 9999:
        raise HTTPException(status_code=400, detail=f"Invalid year: {year}")
    return {"year": year, "holidays": [d.isoformat() for d in holidays_for_year(year)]}
