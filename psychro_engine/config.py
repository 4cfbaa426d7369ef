"""
Psychro engine configuration and constants.

All quantities are SI: temperatures in °C, pressures in Pa, humidity ratio
in kg/kg of dry air, specific enthalpy in kJ/kg, heat of process in W.
"""

# Default atmospheric pressure at sea level
DEFAULT_PRESSURE = 101325.0  # Pa

# Default altitude (sea level)
DEFAULT_ALTITUDE = 0.0  # meters

# Molar mass ratio of water vapour to dry air
WG_RATIO = 18.01528 / 28.96546

# Gas constants and latent heats
DRY_AIR_GAS_CONSTANT = 287.055  # J/(kg·K)
WATER_VAPOUR_GAS_CONSTANT = 461.52  # J/(kg·K)
HEAT_OF_WATER_VAPORIZATION = 2500.9  # kJ/kg at 0 °C
HEAT_OF_ICE_MELT = 334.1  # kJ/kg

# Molar masses
DRY_AIR_MOLAR_MASS = 28.96546  # kg/kmol
WATER_VAPOUR_MOLAR_MASS = 18.01528  # kg/kmol

# Sutherland constants
DRY_AIR_SUTHERLAND_CONSTANT = 111.0  # K
WATER_VAPOUR_SUTHERLAND_CONSTANT = 961.0  # K

# Humid air validity limits
PRESSURE_MIN = 50_000.0  # Pa
PRESSURE_MAX = 5_000_000.0  # Pa
TEMPERATURE_MIN = -100.0  # °C
TEMPERATURE_MAX = 200.0  # °C
HUMIDITY_RATIO_MAX = 3.0  # kg/kg

# Flow limits
MASS_FLOW_MAX = 5.0e9  # kg/s

# Liquid water limits
WATER_TEMPERATURE_MIN = 0.0  # °C
WATER_TEMPERATURE_MAX = 200.0  # °C

# Coolant supply/return limits
COOLANT_TEMPERATURE_MIN = 0.0  # °C
COOLANT_TEMPERATURE_MAX = 90.0  # °C

# Root finder defaults
SOLVER_ACCURACY = 1e-8
SOLVER_MAX_ITERATIONS = 100

# Saturation pressure bracket around the analytic estimate
SOLVER_A_COEF = 0.8
SOLVER_B_COEF = 1.01
SOLVER_HIGH_TEMP_COEF = 1.1  # widens the upper bracket above 50 °C

# Dew point estimate is refined below this RH
DEW_POINT_REFINE_RH = 25.0  # %

# Process limits
RH_MIN = 0.0  # %
RH_MAX_PROCESS = 98.0  # %, target RH ceiling for heating and cooling
HEATING_LIMIT_RATIO = 0.98  # fraction of the saturation-limited max dry bulb

# Supported input pair combinations for state point resolution.
SUPPORTED_INPUT_PAIRS: list[tuple[str, str]] = [
    ("Tdb", "RH"),
    ("Tdb", "W"),
    ("Tdb", "Tdp"),
    ("Tdb", "Twb"),
    ("Tdb", "h"),
    ("W", "h"),
    ("W", "RH"),
    ("Tdp", "RH"),
    ("Twb", "RH"),
]

# Property labels and units for display
PROPERTY_UNITS = {
    "pressure": "Pa",
    "temperature": "°C",
    "humidity_ratio": "kg/kg",
    "relative_humidity": "%",
    "saturation_pressure": "Pa",
    "max_humidity_ratio": "kg/kg",
    "wet_bulb_temperature": "°C",
    "dew_point_temperature": "°C",
    "density": "kg/m³",
    "specific_heat": "kJ/(kg·K)",
    "specific_enthalpy": "kJ/kg",
    "dynamic_viscosity": "Pa·s",
    "kinematic_viscosity": "m²/s",
    "thermal_conductivity": "W/(m·K)",
    "thermal_diffusivity": "m²/s",
    "prandtl_number": "",
    "mass_flow": "kg/s",
    "volumetric_flow": "m³/s",
    "heat_of_process": "W",
}
