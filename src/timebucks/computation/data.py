"""
Embedded reference index data

Annual values, sparse by decade. Static: never updated at runtime.

CPI:   US CPI-U annual average (1982-84 = 100)
WAGE:  US average annual wage, USD
GOLD:  Gold price, USD per troy ounce
"""

CPI_DATA: dict[int, str] = {
    1913: "9.9",
    1920: "20.0",
    1930: "16.7",
    1940: "14.0",
    1950: "24.1",
    1960: "29.6",
    1970: "38.8",
    1980: "82.4",
    1990: "130.7",
    2000: "172.2",
    2010: "218.1",
    2020: "258.8",
    2024: "310.3",
}

WAGE_DATA: dict[int, str] = {
    1913: "633",
    1920: "1236",
    1930: "1368",
    1940: "1299",
    1950: "2992",
    1960: "4007",
    1970: "6186",
    1980: "12513",
    1990: "21027",
    2000: "32154",
    2010: "41673",
    2020: "51916",
    2024: "59384",
}

GOLD_PRICE_DATA: dict[int, str] = {
    1913: "20.67",
    1920: "20.67",
    1930: "20.67",
    1940: "35.00",
    1950: "40.25",
    1960: "35.27",
    1970: "36.56",
    1980: "607.97",
    1990: "383.51",
    2000: "279.11",
    2010: "1224.53",
    2020: "1770.75",
    2024: "2340.00",
}
