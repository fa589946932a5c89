"""Constants for the NS API adapter.

API portal: https://apiportal.ns.nl/
Requests are authenticated with the Ocp-Apim-Subscription-Key header.
"""

NS_GATEWAY_URL = "https://gateway.apiportal.ns.nl"
NS_PRICE_URL = f"{NS_GATEWAY_URL}/reisinformatie-api/api/v3/price"  # GET /price?fromStation=...
NS_STATIONS_URL = f"{NS_GATEWAY_URL}/nsapp-stations/v3"  # GET /nsapp-stations/v3

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

# Fixed passenger composition for price queries
DEFAULT_PRICE_PARAMS = {
    "isJointJourney": "false",
    "adults": "1",
    "children": "0",
}
