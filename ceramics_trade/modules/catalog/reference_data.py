# modules/catalog/reference_data.py
"""
Shipped reference tables. A JSON file (see config.REFERENCE_TABLES_PATH) can
replace any section without touching code.
"""

# Invoice lines: tile size in inches -> pieces per box
INVOICE_PIECES_PER_BOX = {
    "24X24": 4, "32X32": 2, "24X48": 2, "40X40": 2, "16X16": 9,
    "12X12": 16, "10.5X12": 19, "8X12": 25, "10X16": 15, "8X20": 14,
    "10X28": 8, "12X24": 8, "8X8": 20, "12X84": 4, "8X48": 6,
}

# Warehouse / box orders: tile size in centimetres -> pieces per box
BOX_PIECES_PER_BOX = {
    "20X20": 25, "20X30": 17, "25X40": 10, "30X30": 11, "30X45": 8,
    "30X60": 8, "40X40": 6, "60X60": 4, "60X120": 2, "80X80": 3,
}

# (series, size) -> pieces per box, expanded to every catalogue model of the series
SERIES_OVERRIDES = {
    ("HDT", "20X20"): 15,
}

# model, series, size (cm)
MODELS = [
    ("HDT-2001", "HDT", "20X20"),
    ("HDT-2005", "HDT", "20X20"),
    ("HDT-2010", "HDT", "20X20"),
    ("GLZ-2002", "GLZ", "20X20"),
    ("GLZ-2030", "GLZ", "20X30"),
    ("WL-2540", "WL", "25X40"),
    ("FL-3030", "FL", "30X30"),
    ("WL-3045", "WL", "30X45"),
    ("WL-3060", "WL", "30X60"),
    ("FL-4040", "FL", "40X40"),
    ("PG-6060", "PG", "60X60"),
    ("PG-6060M", "PG", "60X60"),
    ("PG-60120", "PG", "60X120"),
    ("PG-8080", "PG", "80X80"),
]

# Taka per sft
DEFAULT_RATES = {
    "20X20": 48.0, "20X30": 52.0, "25X40": 58.0, "30X30": 60.0, "30X45": 64.0,
    "30X60": 70.0, "40X40": 66.0, "60X60": 95.0, "60X120": 160.0, "80X80": 140.0,
}

SPECIAL_RATES = {
    "HDT-2001": 55.0,
    "PG-6060M": 110.0,
}
