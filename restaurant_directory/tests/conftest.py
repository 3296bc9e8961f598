import pandas as pd
import pytest
from fastapi.testclient import TestClient

from restaurant_directory.app import app
from restaurant_directory.backends import get_backend
from restaurant_directory.backends.data_store import DataFrameBackend

CENTER_LAT = 12.9716
CENTER_LON = 77.5946

# (id, name, km-step north of the center, cuisines, cost for two, rating)
# One step is 0.01 degrees of latitude, about 1.11 km.
_BANGALORE = [
    (150, "Truffles", 0, "Cafe, American, Burger", 900, 4.7),
    (200, "Meghana Foods", 0, "Biryani, North Indian", 600, 4.6),
    (199, "Pizza Hut", 1, "Pizza, Fast Food", 500, 3.9),
    (198, "Corner House", 2, "Ice Cream, Desserts", 250, 4.8),
    (197, "Empire", 3, "North Indian, Chinese", 700, 4.1),
    (196, "Chinita", 4, "Mexican", 1200, 4.3),
    (195, "Toit", 5, "Pizza, Italian", 2000, 4.7),
    (194, "Vidyarthi Bhavan", 6, "South Indian", 200, 0.0),
    (193, "Smoke House Deli", 7, "European, Italian", 1500, 4.2),
    (192, "Mainland China", 8, "Chinese", 1600, 4.4),
    (191, "Baskin Robbins", 9, "Ice Cream", 300, 3.8),
    (190, "Burger King", 10, "Burger, Fast Food", 400, 3.7),
    (189, "CTR", 11, "South Indian", 150, 4.6),
]


def restaurant_rows() -> list[dict]:
    rows = [
        {
            "restaurant_id": rid,
            "restaurant_name": name,
            "country_code": 1,
            "city": "Bangalore",
            "address": f"{step} MG Road, Bangalore",
            "latitude": CENTER_LAT + step * 0.01,
            "longitude": CENTER_LON,
            "cuisines": cuisines,
            "average_cost_for_two": cost,
            "aggregate_rating": rating,
        }
        for rid, name, step, cuisines, cost, rating in _BANGALORE
    ]
    rows += [
        {
            "restaurant_id": 300,
            "restaurant_name": "Karim's",
            "country_code": 1,
            "city": "New Delhi",
            "address": "Jama Masjid, Old Delhi",
            "latitude": 28.6129,
            "longitude": 77.2295,
            "cuisines": "Mughlai",
            "average_cost_for_two": 800,
            "aggregate_rating": 4.0,
        },
        {
            "restaurant_id": 400,
            "restaurant_name": "Joe's Pizza",
            "country_code": 216,
            "city": "New York City",
            "address": "7 Carmine St",
            "latitude": 40.7306,
            "longitude": -73.9866,
            "cuisines": "Pizza",
            "average_cost_for_two": 50,
            "aggregate_rating": 4.5,
            "description": "Classic New York slice",
        },
        {
            "restaurant_id": 500,
            "restaurant_name": "Bills",
            "country_code": 14,
            "city": "Sydney",
            "address": "433 Liverpool St",
            "latitude": -33.8688,
            "longitude": 151.2093,
            "cuisines": "Cafe, Australian",
            "average_cost_for_two": 80,
            "aggregate_rating": 4.4,
        },
    ]
    return rows


@pytest.fixture
def backend():
    return DataFrameBackend(pd.DataFrame(restaurant_rows()))


@pytest.fixture
def client(backend):
    app.dependency_overrides[get_backend] = lambda: backend
    yield TestClient(app)
    app.dependency_overrides.clear()
