from enum import Enum


class MarginType(str, Enum):
    FIXED = "fixed"
    PERCENTAGE = "percentage"


class SystemTier(str, Enum):
    GOOD = "good"
    BETTER = "better"
    BEST = "best"


class MaintenanceTier(str, Enum):
    BASIC = "basic"
    STANDARD = "standard"
    PREMIUM = "premium"


class FinancingType(str, Enum):
    CASH = "cash"
    FINANCE = "finance"
    LEASE = "lease"


class PaymentMethod(str, Enum):
    CASH = "cash"
    FINANCE = "finance"
    LEASE = "lease"


class IncentiveType(str, Enum):
    REBATE = "rebate"
    TAX_CREDIT = "tax_credit"
    DISCOUNT = "discount"


class PriceBookSection(str, Enum):
    HVAC_SYSTEMS = "hvac_systems"
    ADD_ONS = "add_ons"
    MAINTENANCE_PLANS = "maintenance_plans"
    BUNDLE_DISCOUNTS = "bundle_discounts"
    INCENTIVES = "incentives"
    FINANCING_OPTIONS = "financing_options"
    UNITS = "units"
    LABOR_RATES = "labor_rates"
    PERMIT_FEES = "permit_fees"
