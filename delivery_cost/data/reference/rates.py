"""
Delivery Rates

Per-unit surcharges added to the base delivery cost:

    cost_raw = base_cost + weight * WEIGHT_RATE + distance * DISTANCE_RATE
"""

WEIGHT_RATE = 10              # Cost per unit of package weight
DISTANCE_RATE = 5             # Cost per unit of delivery distance
