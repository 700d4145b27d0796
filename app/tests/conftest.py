import pytest
from fastapi.testclient import TestClient
from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy.pool import StaticPool
import sys
import os

# Добавляем путь к app в PYTHONPATH
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from main import app
from database.database import get_session
from models.product import Product
from models.department import Department
from models.category import Category
from models.product_category import ProductCategory
from models.attribute import Attribute, AttributeValue, ProductAttribute

LONG_DESCRIPTION = "Arc de Triomphe T-shirt. " * 12


@pytest.fixture(name="engine")
def engine_fixture():
    """Тестовая БД в памяти"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    with Session(engine) as session:
        _create_test_data(session)
        yield session


def _create_test_data(session: Session):
    """Создаем начальные тестовые данные"""
    # Отделы (в отделе 3 нет категорий)
    session.add_all([
        Department(department_id=1, name="Regional", description="National symbols"),
        Department(department_id=2, name="Nature", description="Animals and flowers"),
        Department(department_id=3, name="Seasonal", description="Holidays"),
    ])

    # Категории
    session.add_all([
        Category(category_id=1, department_id=1, name="French", description="French stamps"),
        Category(category_id=2, department_id=1, name="Italian", description="Italian stamps"),
        Category(category_id=3, department_id=2, name="Animal", description="Animal T-shirts"),
    ])

    # Товары (товар 5 без категории)
    session.add_all([
        Product(product_id=1, name="Arc d'Triomphe", description=LONG_DESCRIPTION, price=14.99),
        Product(product_id=2, name="Chartres Cathedral", description="Gothic cathedral beauty", price=16.95),
        Product(product_id=3, name="Italia", description="Stamp designed after the war", price=18.99),
        Product(product_id=4, name="Gorilla", description="A magnificent gorilla", price=15.50),
        Product(product_id=5, name="Blank Tee", description=None, price=9.99),
    ])

    # Товар 2 входит в две категории одного отдела
    session.add_all([
        ProductCategory(product_id=1, category_id=1),
        ProductCategory(product_id=2, category_id=1),
        ProductCategory(product_id=2, category_id=2),
        ProductCategory(product_id=3, category_id=2),
        ProductCategory(product_id=4, category_id=3),
    ])

    # Атрибуты
    session.add_all([
        Attribute(attribute_id=1, name="Size"),
        Attribute(attribute_id=2, name="Color"),
        AttributeValue(attribute_value_id=1, attribute_id=1, value="S"),
        AttributeValue(attribute_value_id=2, attribute_id=2, value="White"),
        ProductAttribute(product_id=1, attribute_value_id=1),
        ProductAttribute(product_id=1, attribute_value_id=2),
    ])

    session.commit()


@pytest.fixture(name="client")
def client_fixture(session: Session):
    """Создаем тестовый клиент"""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
