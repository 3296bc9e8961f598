import numpy as np
import pandas as pd

from restaurant_directory.backends.base import ListingQuery
from restaurant_directory.backends.data_store import DataFrameBackend, haversine_km

CENTER = {"longitude": 77.5946, "latitude": 12.9716}


def test_haversine_one_hundredth_degree_latitude():
    d = haversine_km(12.9716, 77.5946, np.array([12.9816]), np.array([77.5946]))
    assert abs(d[0] - 1.112) < 0.01


def test_radius_page_ordered_by_distance_then_id(backend):
    rows = backend.restaurants_within_radius(**CENTER, radius_km=5, page=1, limit=10)
    assert [r["restaurant_id"] for r in rows] == [150, 200, 199, 198, 197, 196]
    distances = [r["distance_km"] for r in rows]
    assert distances == sorted(distances)


def test_radius_count_ignores_pagination(backend):
    assert backend.restaurants_within_radius_count(**CENTER, radius_km=5) == 6
    assert backend.restaurants_within_radius_count(**CENTER, radius_km=20) == 13


def test_radius_page_offset(backend):
    rows = backend.restaurants_within_radius(**CENTER, radius_km=20, page=3, limit=5)
    assert [r["restaurant_id"] for r in rows] == [191, 190, 189]


def test_rows_missing_coordinates_never_match():
    df = pd.DataFrame([
        {"restaurant_id": 1, "latitude": None, "longitude": None},
        {"restaurant_id": 2, "latitude": 12.9716, "longitude": 77.5946},
    ])
    backend = DataFrameBackend(df)
    assert backend.restaurants_within_radius_count(**CENTER, radius_km=50000) == 1


def test_rows_are_json_safe(backend):
    rows = backend.restaurants_within_radius(**CENTER, radius_km=1, page=1, limit=10)
    # description is absent for these rows and must come back as None, not NaN
    assert all(r["description"] is None for r in rows)
    assert all(not k.startswith("_") for r in rows for k in r)


def test_list_restaurants_filters(backend):
    rows, count = backend.list_restaurants(ListingQuery(name="PIZZA"))
    assert count == 2
    assert {r["restaurant_name"] for r in rows} == {"Pizza Hut", "Joe's Pizza"}

    _, count = backend.list_restaurants(ListingQuery(country_codes=[14, 216]))
    assert count == 2

    _, count = backend.list_restaurants(ListingQuery(max_spend=300))
    assert count == 6

    rows, count = backend.list_restaurants(ListingQuery(description="slice"))
    assert count == 1
    assert rows[0]["restaurant_id"] == 400


def test_list_restaurants_range(backend):
    rows, count = backend.list_restaurants(ListingQuery(offset=10, limit=10))
    assert count == 16
    assert len(rows) == 6


def test_get_restaurant(backend):
    assert backend.get_restaurant("198")["restaurant_name"] == "Corner House"
    assert backend.get_restaurant("999") is None


def test_summaries_only_carry_summary_columns(backend):
    summaries = backend.restaurant_summaries()
    assert len(summaries) == 16
    assert set(summaries[0]) == {
        "restaurant_id", "restaurant_name", "address", "cuisines", "city", "aggregate_rating",
    }


def test_from_csv(tmp_path):
    path = tmp_path / "restaurants.csv"
    pd.DataFrame([
        {"restaurant_id": 7, "restaurant_name": "Koshy's", "latitude": 12.9757, "longitude": 77.6011},
    ]).to_csv(path, index=False)
    backend = DataFrameBackend.from_csv(path)
    assert backend.get_restaurant("7")["restaurant_name"] == "Koshy's"
