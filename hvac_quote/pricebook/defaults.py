"""
Default price book — used on first run, before an admin saves anything.
"""

from __future__ import annotations

from hvac_quote.models.enums import (
    FinancingType,
    IncentiveType,
    MaintenanceTier,
    MarginType,
    SystemTier,
)
from hvac_quote.models.schemas import (
    AddOn,
    BundleDiscount,
    FinancingOption,
    HVACSystem,
    Incentive,
    LaborRate,
    MaintenancePlan,
    PermitFee,
    PriceBook,
    PriceBookUnit,
    PricingSettings,
)


DEFAULT_HVAC_SYSTEMS = [
    HVACSystem(
        id="1",
        name="Essential Comfort",
        tier=SystemTier.GOOD,
        description="Goodman GSX16 Series",
        base_cost=9999,
        margin_type=MarginType.FIXED,
        margin_amount=2500,
        features=[
            "16 SEER Energy Efficiency",
            "Standard 10-Year Warranty",
            "Single-Stage Cooling",
            "Quiet Operation",
            "Reliable Performance",
        ],
    ),
    HVACSystem(
        id="2",
        name="Premium Comfort",
        tier=SystemTier.BETTER,
        description="Daikin DX18TC Series",
        base_cost=11499,
        margin_type=MarginType.FIXED,
        margin_amount=3000,
        features=[
            "18 SEER High Efficiency",
            "Extended 12-Year Warranty",
            "Two-Stage Cooling",
            "Ultra-Quiet Operation",
            "Enhanced Humidity Control",
            "Smart Thermostat Compatible",
            "Energy Star Certified",
        ],
    ),
    HVACSystem(
        id="3",
        name="Ultimate Comfort",
        tier=SystemTier.BEST,
        description="Daikin DX20VC Variable Speed",
        base_cost=14999,
        margin_type=MarginType.FIXED,
        margin_amount=3500,
        features=[
            "20 SEER Maximum Efficiency",
            "Premium 12-Year Warranty + 2 Year Labor",
            "Variable Speed Inverter Technology",
            "Whisper-Quiet Operation",
            "Superior Humidity Control",
            "Wi-Fi Enabled Smart Controls",
            "Energy Star Most Efficient",
            "Lifetime Compressor Warranty",
        ],
    ),
]

DEFAULT_ADD_ONS = [
    AddOn(id="1", name="UV Light Air Purifier", description="Kills 99.9% of airborne bacteria",
          base_cost=500, margin_amount=350),
    AddOn(id="2", name="HEPA Filtration System", description="Hospital-grade air cleaning",
          base_cost=400, margin_amount=250),
    AddOn(id="3", name="Extended Warranty (10yr)", description="Complete coverage & priority service",
          base_cost=800, margin_amount=400),
    AddOn(id="4", name="Premium Smart Thermostat", description="Advanced scheduling & remote control",
          base_cost=250, margin_amount=200),
    AddOn(id="5", name="Duct Sealing Package", description="Improve efficiency by up to 20%",
          base_cost=600, margin_amount=300),
    AddOn(id="6", name="Surge Protector", description="Protect your investment from power surges",
          base_cost=150, margin_amount=100),
]

DEFAULT_MAINTENANCE_PLANS = [
    MaintenancePlan(
        id="1",
        name="Basic Maintenance",
        tier=MaintenanceTier.BASIC,
        description="Essential annual tune-up to keep your system running",
        base_cost=214,
        margin_type=MarginType.PERCENTAGE,
        margin_amount=40,
        visits_per_year=1,
        features=[
            "Annual system inspection",
            "Thermostat calibration",
            "15% discount on repairs",
            "Filter replacement",
            "Basic cleaning",
            "Priority scheduling",
        ],
    ),
    MaintenancePlan(
        id="2",
        name="Standard Maintenance",
        tier=MaintenanceTier.STANDARD,
        description="Comprehensive bi-annual service for optimal performance",
        base_cost=428,
        margin_type=MarginType.PERCENTAGE,
        margin_amount=40,
        visits_per_year=2,
        features=[
            "Spring & fall tune-ups (2 visits)",
            "Complete system cleaning",
            "Electrical connection testing",
            "20% discount on repairs",
            "No trip charges",
            "Premium filter replacements",
            "Refrigerant level check",
            "Condensate drain cleaning",
            "Priority emergency service",
        ],
    ),
    MaintenancePlan(
        id="3",
        name="Premium Care Plan",
        tier=MaintenanceTier.PREMIUM,
        description="Ultimate protection with quarterly visits and best coverage",
        base_cost=699,
        margin_type=MarginType.FIXED,
        margin_amount=200,
        visits_per_year=4,
        features=[
            "Quarterly system check-ups (4 visits)",
            "Deep coil cleaning",
            "Refrigerant optimization",
            "Smart thermostat optimization",
            "Priority 24/7 emergency service",
            "Parts coverage up to $500/year",
            "Premium HEPA filter replacements",
            "Full electrical inspection",
            "Duct inspection & cleaning",
            "25% discount on all repairs",
            "No trip or diagnostic charges",
            "Transferable to new homeowner",
        ],
    ),
]

DEFAULT_BUNDLE_DISCOUNTS = [
    BundleDiscount(id="1", years=3, discount_percent=5, label="3-Year Bundle"),
    BundleDiscount(id="2", years=5, discount_percent=10, label="5-Year Bundle", badge="Popular"),
    BundleDiscount(id="3", years=7, discount_percent=15, label="7-Year Bundle", badge="Best Value"),
]

DEFAULT_INCENTIVES = [
    Incentive(
        id="1",
        name="Federal Tax Credit",
        amount=2000,
        type=IncentiveType.TAX_CREDIT,
        description="Federal energy efficiency tax credit for qualifying HVAC systems",
        requirements=[
            "Must be primary residence",
            "System must meet SEER 16+ rating",
            "Installation by certified contractor",
        ],
    ),
    Incentive(
        id="2",
        name="Utility Rebate",
        amount=500,
        type=IncentiveType.REBATE,
        description="Local utility company rebate for high-efficiency equipment",
        requirements=["Active utility account required", "Must be ENERGY STAR certified"],
    ),
    Incentive(
        id="3",
        name="Manufacturer Rebate",
        amount=300,
        type=IncentiveType.REBATE,
        description="Seasonal manufacturer rebate on select equipment",
        requirements=["Limited time offer", "Select models only"],
    ),
]


def _comfort_plan(option_id: str, years: int, escalator: float, description: str) -> FinancingOption:
    return FinancingOption(
        id=option_id,
        name=f"Palmetto Comfort Plan - {years} Year ({escalator:g}% Escalator)",
        type=FinancingType.LEASE,
        term_months=years * 12,
        description=description,
        provider="Lightreach",
        escalator_percent=escalator,
    )


DEFAULT_FINANCING_OPTIONS = [
    FinancingOption(id="1", name="Cash Payment", type=FinancingType.CASH,
                    description="Pay in full - receive 5% discount"),
    FinancingOption(id="2", name="Same-As-Cash 12 Months", type=FinancingType.FINANCE,
                    term_months=12, apr=0, dealer_fee=5,
                    description="No interest if paid in full within 12 months", provider="GreenSky"),
    FinancingOption(id="3", name="60 Month Financing", type=FinancingType.FINANCE,
                    term_months=60, apr=9.99, dealer_fee=8,
                    description="Low monthly payments", provider="GreenSky"),
    FinancingOption(id="4", name="84 Month Financing", type=FinancingType.FINANCE,
                    term_months=84, apr=11.99, dealer_fee=10,
                    description="Extended term option", provider="GreenSky"),
    FinancingOption(id="5", name="120 Month Financing", type=FinancingType.FINANCE,
                    term_months=120, apr=12.99, dealer_fee=12,
                    description="Lowest monthly payment", provider="GreenSky"),
    _comfort_plan("6", 10, 0, "Fixed payment - Maintenance, filters, repairs included"),
    _comfort_plan("7", 10, 0.99, "Lower initial payment, increases 0.99% annually"),
    _comfort_plan("8", 10, 1.99, "Lowest initial payment, increases 1.99% annually"),
    _comfort_plan("9", 12, 0, "Fixed payment - Maintenance, filters, repairs included"),
    _comfort_plan("10", 12, 0.99, "Lower initial payment, increases 0.99% annually"),
    _comfort_plan("11", 12, 1.99, "Lowest initial payment, increases 1.99% annually"),
]

DEFAULT_LABOR_RATES = [
    LaborRate(id="1", name="Standard Crew Rate", description="2-person crew standard rate",
              rate=150, is_default=True),
    LaborRate(id="2", name="Premium Crew Rate",
              description="2-person crew premium rate (complex installs)", rate=200),
    LaborRate(id="3", name="Apprentice Rate", description="Single apprentice rate", rate=75),
]

DEFAULT_PERMIT_FEES = [
    PermitFee(id="1", name="Small System", tonnage_range="2-2.5 Ton", max_tonnage=2.5, fee=200),
    PermitFee(id="2", name="Medium System", tonnage_range="3-3.5 Ton", max_tonnage=3.5, fee=225),
    PermitFee(id="3", name="Large System", tonnage_range="4-5 Ton", max_tonnage=5, fee=275),
]


def _unit(unit_id: str, brand: str, model: str, tier: SystemTier, tonnage: float,
          cost: float, hours: float, seer: float, lead_days: int) -> PriceBookUnit:
    return PriceBookUnit(
        id=unit_id,
        name=f"{brand} {model}",
        tier=tier,
        tonnage=tonnage,
        equipment_cost=cost,
        install_labor_hours=hours,
        seer_rating=seer,
        brand=brand,
        model_number=model,
        lead_time_days=lead_days,
        system_type="Air Conditioner",
    )


DEFAULT_UNITS = [
    _unit("1", "Goodman", "GSX160241", SystemTier.GOOD, 2, 2400, 8, 16, 3),
    _unit("2", "Goodman", "GSX170241", SystemTier.BETTER, 2, 3200, 8, 17, 5),
    _unit("3", "Daikin", "DX18TC0241A", SystemTier.BETTER, 2, 3800, 9, 18, 5),
    _unit("4", "Daikin", "DX20VC0241A", SystemTier.BEST, 2, 5200, 10, 20, 7),
    _unit("5", "Goodman", "GSX160361", SystemTier.GOOD, 3, 2800, 9, 16, 3),
    _unit("6", "Goodman", "GSX170361", SystemTier.BETTER, 3, 3600, 9, 17, 5),
    _unit("7", "Daikin", "DX18TC0361A", SystemTier.BETTER, 3, 4200, 10, 18, 5),
    _unit("8", "Daikin", "DX20VC0361A", SystemTier.BEST, 3, 5800, 11, 20, 7),
    _unit("9", "Goodman", "GSX160481", SystemTier.GOOD, 4, 3200, 10, 16, 3),
    _unit("10", "Goodman", "GSX170481", SystemTier.BETTER, 4, 4000, 10, 17, 5),
    _unit("11", "Daikin", "DX18TC0481A", SystemTier.BETTER, 4, 4800, 11, 18, 5),
    _unit("12", "Daikin", "DX20VC0481A", SystemTier.BEST, 4, 6400, 12, 20, 7),
    _unit("13", "Goodman", "GSX160601", SystemTier.GOOD, 5, 3600, 11, 16, 3),
    _unit("14", "Goodman", "GSX170601", SystemTier.BETTER, 5, 4400, 11, 17, 5),
    _unit("15", "Daikin", "DX18TC0601A", SystemTier.BETTER, 5, 5400, 12, 18, 5),
    _unit("16", "Daikin", "DX20VC0601A", SystemTier.BEST, 5, 7200, 13, 20, 7),
]


def default_price_book() -> PriceBook:
    """Fresh copy of the shipped price book."""
    return PriceBook(
        hvac_systems=DEFAULT_HVAC_SYSTEMS,
        add_ons=DEFAULT_ADD_ONS,
        maintenance_plans=DEFAULT_MAINTENANCE_PLANS,
        bundle_discounts=DEFAULT_BUNDLE_DISCOUNTS,
        incentives=DEFAULT_INCENTIVES,
        financing_options=DEFAULT_FINANCING_OPTIONS,
        units=DEFAULT_UNITS,
        labor_rates=DEFAULT_LABOR_RATES,
        permit_fees=DEFAULT_PERMIT_FEES,
        settings=PricingSettings(),
    ).model_copy(deep=True)
