"""Mock analytics shown on the dashboard. Static demo data, no collection."""

REACH_SERIES = [
    {"name": "00:00", "reach": 400, "conv": 240},
    {"name": "04:00", "reach": 300, "conv": 139},
    {"name": "08:00", "reach": 200, "conv": 980},
    {"name": "12:00", "reach": 278, "conv": 390},
    {"name": "16:00", "reach": 189, "conv": 480},
    {"name": "20:00", "reach": 239, "conv": 380},
    {"name": "23:59", "reach": 349, "conv": 430},
]

HEADLINE_STATS = [
    {"label": "Response", "value": "120ms"},
    {"label": "Accuracy", "value": "99.4%"},
    {"label": "Traffic", "value": "+12.5k"},
    {"label": "Threads", "value": "16 Core"},
]


def get_stats() -> dict:
    total_reach = sum(point["reach"] for point in REACH_SERIES)
    total_conv = sum(point["conv"] for point in REACH_SERIES)
    return {
        "series": [dict(point) for point in REACH_SERIES],
        "headline": [dict(stat) for stat in HEADLINE_STATS],
        "totals": {
            "reach": total_reach,
            "conversions": total_conv,
            "conversion_rate": round(total_conv / total_reach, 3) if total_reach else 0.0,
        },
    }
