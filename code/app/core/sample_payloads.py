SAMPLE_REQUEST = {
    "target_savings": "10000",
    "duration_months": "12",
    "monthly_income": "2000",
}

SAMPLE_REQUEST_CAMEL = {
    "targetSavings": "5000",
    "durationMonths": "0",
    "monthlyIncome": "3000",
}

INVALID_REQUEST = {
    "target_savings": "abc",
    "duration_months": "12",
    "monthly_income": "2000",
}
