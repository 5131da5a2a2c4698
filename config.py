from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    LOG_LEVEL: str = "INFO"
    BRAND_NAME: str = "Electricity‑Generating Tiles Concept"
    CURRENCY_SYMBOL: str = "₹"

    class Config:
        env_file = ".env"


settings = Settings()


# ----------------------------
# Model constants
# ----------------------------
COST_PER_SQFT = 110.0        # ₹ per sq ft of tile coverage
JOULES_PER_KWH = 3_600_000.0
DAYS_PER_MONTH = 30
CHARGE_SECONDS = 0.4         # demo tile highlight


# ----------------------------
# Calculator controls
# key -> (label, min, max, step, default, unit suffix, display decimals)
# ----------------------------
SLIDERS = {
    "area_sqft": ("Area (sq ft)", 50, 5000, 10, 500, "sq ft", 0),
    "daily_traffic": ("Foot Traffic (people/day)", 500, 100000, 500, 8000, "", 0),
    "steps_per_person": ("Avg Steps on Tiles per Person", 1, 20, 1, 4, "", 0),
    "joules_per_step": ("Energy Captured per Step (J)", 0.2, 5.0, 0.1, 1.5, "J/step", 1),
    "efficiency": ("System Efficiency (0–1)", 0.3, 0.95, 0.01, 0.7, "", 2),
    "tariff": ("Electricity Tariff (₹/kWh)", 4.0, 20.0, 0.5, 8.0, "₹/kWh", 1),
}


def bounds(key: str) -> tuple:
    _, lo, hi, _, _, _, _ = SLIDERS[key]
    return lo, hi


def default(key: str):
    return SLIDERS[key][4]


# ----------------------------
# Page copy
# ----------------------------
TEXTS = {
    "badge": "Prototype concept for high-footfall spaces",
    "title": "Electricity‑Generating Tiles",
    "intro": (
        "Turn footsteps into usable electricity. Perfect for malls, transit hubs, campuses, "
        "and smart-city corridors. Explore how it works and estimate real‑world impact with "
        "the calculator below."
    ),
    "assumptions": (
        "**Assumptions:** Values here are illustrative and adjustable. Actual output depends on "
        "tile design, piezo stack, load electronics, and placement."
    ),
    "assumption_bullets": [
        "Coverage cost fixed at **₹110/sq ft** (as specified).",
        "Foot traffic typical for mid-to-large Indian malls (configure as needed).",
        "Energy per step default **1.5 J**; adjust slider to explore conservative/optimistic cases.",
    ],
    "ideal_sites": "Ideal sites: **malls, metro stations, airports, stadiums, campuses**",
    "contact_title": "Step into the Future",
    "contact_intro": (
        "Want this in your mall? Share your corridor size and footfall to receive a tailored "
        "estimate and deployment plan."
    ),
    "contact_sent": "Thanks! This is a demonstration page, so your inquiry was not stored or sent.",
}

FLOW_ITEMS = [
    ("⚡", "Pressure → Voltage", "Piezo layers deform under footstep creating electrical potential."),
    ("🔋", "Rectify & Store", "AC output is conditioned and stored in a battery/capacitor bank."),
    ("🏢", "Power Loads", "Energy supports LED signage, ambient lighting, kiosks, or sensors."),
]

INFO_CARDS = [
    ("⚡", "Piezoelectric Stack",
     "Each tile contains a piezoelectric stack sandwiched in a rugged composite. When stepped on, "
     "the stack produces a small burst of electricity."),
    ("🔋", "Power Electronics",
     "The raw output is rectified, smoothed, and routed to storage. Energy can be buffered to run "
     "LEDs, displays, or fed into a microgrid."),
    ("🧮", "Sized for Footfall",
     "Output scales with people and steps. Use the calculator to model your mall’s corridor or "
     "atrium and compare costs vs. savings."),
]
