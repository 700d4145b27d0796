import pandas as pd
import pytest
from sqlmodel import Session, SQLModel, create_engine, select
from sqlalchemy.pool import StaticPool

from database.init_db import init_db, check_db_health
from models.product import Product


@pytest.fixture(name="empty_engine")
def empty_engine_fixture():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


def test_init_db_creates_sample_data(empty_engine, tmp_path):
    """Без CSV файлов загружается минимальный набор данных"""
    init_db(engine=empty_engine, data_dir=tmp_path)

    with Session(empty_engine) as session:
        stats = check_db_health(session)

    assert stats == {"departments": 2, "categories": 3, "products": 4, "status": "healthy"}


def test_init_db_is_idempotent(empty_engine, tmp_path):
    init_db(engine=empty_engine, data_dir=tmp_path)
    init_db(engine=empty_engine, data_dir=tmp_path)

    with Session(empty_engine) as session:
        assert check_db_health(session)["departments"] == 2


def test_init_db_loads_csv(empty_engine, tmp_path):
    frames = {
        "departments.csv": [{"department_id": 1, "name": "Regional", "description": "Stamps"}],
        "categories.csv": [{"category_id": 1, "department_id": 1, "name": "French", "description": "France"}],
        "products.csv": [
            {"product_id": 1, "name": "Arc d'Triomphe", "description": "Triumph", "price": 14.99},
            {"product_id": 2, "name": "Blank", "description": None, "price": 9.5},
        ],
        "product_category.csv": [{"product_id": 1, "category_id": 1}],
        "attributes.csv": [{"attribute_id": 1, "name": "Size"}],
        "attribute_values.csv": [{"attribute_value_id": 1, "attribute_id": 1, "value": "XL"}],
        "product_attribute.csv": [{"product_id": 1, "attribute_value_id": 1}],
    }
    for filename, records in frames.items():
        pd.DataFrame(records).to_csv(tmp_path / filename, index=False)

    init_db(engine=empty_engine, data_dir=tmp_path)

    with Session(empty_engine) as session:
        stats = check_db_health(session)
        products = session.exec(select(Product).order_by(Product.product_id)).all()

        assert stats["departments"] == 1
        assert stats["products"] == 2
        assert products[1].description is None
        assert [c.name for c in products[0].categories] == ["French"]
        assert [v.value for v in products[0].attributes] == ["XL"]
