from suite_money.domain.monetary.currency import Currency


USD = Currency("USD", "US Dollar")
EUR = Currency("EUR", "Euro")
GBP = Currency("GBP", "British Pound")
CHF = Currency("CHF", "Swiss Franc")
CZK = Currency("CZK", "Czech Koruna")
