POLICY = {
    # Global
    "daily_cap": 60,       # max charged per vehicle per calendar day
    "window_minutes": 60,  # single charge per rolling hour

    # Fee bands (inclusive on both ends, minute precision).
    # Gothenburg 2013 rates: 06:50 costs 13 and 08:15 costs 13. The flat
    # 8-unit morning table used for the worked examples is EXAMPLE_POLICY
    # in tests/test_blackbox_tax.py.
    "fee_bands": [
        {"start": "06:00", "end": "06:29", "fee": 8},
        {"start": "06:30", "end": "06:59", "fee": 13},
        {"start": "07:00", "end": "07:59", "fee": 18},
        {"start": "08:00", "end": "08:29", "fee": 13},
        {"start": "08:30", "end": "14:59", "fee": 8},
        {"start": "15:00", "end": "15:29", "fee": 13},
        {"start": "15:30", "end": "16:59", "fee": 18},
        {"start": "17:00", "end": "17:59", "fee": 13},
        {"start": "18:00", "end": "18:29", "fee": 8},
    ],

    # Vehicle categories that are never charged
    "exempt_vehicles": [
        "Motorcycle",
        "Tractor",
        "Emergency",
        "Diplomat",
        "Foreign",
        "Military",
    ],

    # Toll-free dates
    "weekend_exempt": True,
    "exempt_dates": {
        2013: {
            "months": [7],
            "days": [
                "01-01",
                "03-28", "03-29",
                "04-01", "04-30",
                "05-01", "05-08", "05-09",
                "06-05", "06-06", "06-21",
                "11-01",
                "12-24", "12-25", "12-26", "12-31",
            ],
        },
    },
}
