import sys
from pathlib import Path
from typing import Optional, Union

from sqlmodel import SQLModel, Session, select, func
from sqlalchemy.engine import Engine
import pandas as pd
import logging

# Импорт всех моделей для создания таблиц
from models.product import Product
from models.department import Department
from models.category import Category
from models.product_category import ProductCategory
from models.attribute import Attribute, AttributeValue, ProductAttribute

logger = logging.getLogger(__name__)

# Файл CSV -> (модель, колонки)
SEED_FILES = [
    ("departments.csv", Department, ["department_id", "name", "description"]),
    ("categories.csv", Category, ["category_id", "department_id", "name", "description"]),
    ("products.csv", Product, ["product_id", "name", "description", "price"]),
    ("product_category.csv", ProductCategory, ["product_id", "category_id"]),
    ("attributes.csv", Attribute, ["attribute_id", "name"]),
    ("attribute_values.csv", AttributeValue, ["attribute_value_id", "attribute_id", "value"]),
    ("product_attribute.csv", ProductAttribute, ["product_id", "attribute_value_id"]),
]


def init_db(drop_all: bool = False, engine: Optional[Engine] = None, data_dir: Union[str, Path] = "data") -> None:
    """
    Инициализация схемы базы данных.

    Args:
        drop_all: Если True, удаляет все таблицы перед созданием
        engine: Движок БД (по умолчанию - из database.database)
        data_dir: Каталог с CSV файлами начальных данных
    """
    if engine is None:
        from database.database import engine

    try:
        if drop_all:
            logger.warning("Удаление всех таблиц...")
            SQLModel.metadata.drop_all(engine)

        logger.info("Создание таблиц...")
        SQLModel.metadata.create_all(engine)

        with Session(engine) as session:
            # Проверяем, нужно ли загружать данные
            if session.exec(select(Department)).first() is None:
                logger.info("Загрузка начальных данных...")
                load_initial_data(session, data_dir)

        logger.info("База данных успешно инициализирована")

    except Exception as e:
        logger.error(f"Ошибка при инициализации БД: {e}")
        raise


def load_initial_data(session: Session, data_dir: Union[str, Path] = "data") -> None:
    """
    Загрузка начальных данных из CSV файлов.

    Если файлов нет, создается минимальный набор данных.
    """
    try:
        load_catalog_from_csv(session, data_dir)
    except FileNotFoundError:
        logger.warning("CSV файлы не найдены, используем минимальный набор данных")
        session.rollback()
        create_sample_data(session)

    session.commit()


def load_catalog_from_csv(session: Session, data_dir: Union[str, Path]) -> None:
    """Загрузка каталога из CSV (отделы, категории, товары, атрибуты и связи)"""
    data_dir = Path(data_dir)

    for filename, model, columns in SEED_FILES:
        df = pd.read_csv(data_dir / filename)
        missing = [c for c in columns if c not in df.columns]
        if missing:
            raise ValueError(f"{filename}: нет колонок {missing}")

        df = df[columns].astype(object).where(df[columns].notna(), None)
        for record in df.to_dict(orient="records"):
            session.merge(model(**record))

        # Связи ссылаются на уже загруженные строки
        session.flush()
        logger.info(f"{filename}: загружено {len(df)} строк")


def create_sample_data(session: Session) -> None:
    """Создание минимального набора тестовых данных"""
    regional = Department(name="Regional", description="Proud of your country? Wear a T-shirt with a national symbol stamp!")
    nature = Department(name="Nature", description="Find beautiful T-shirts with animals and flowers in our Nature department!")
    session.add_all([regional, nature])
    session.flush()

    french = Category(department_id=regional.department_id, name="French", description="The French have always had an eye for beauty.")
    italian = Category(department_id=regional.department_id, name="Italian", description="The full and resplendent treasure chest of art.")
    animal = Category(department_id=nature.department_id, name="Animal", description="Our ever-growing selection of beautiful animal T-shirts.")
    session.add_all([french, italian, animal])
    session.flush()

    products = [
        Product(name="Arc d'Triomphe", description="This beautiful and iconic T-shirt will no doubt lead you to your own triumph.", price=14.99),
        Product(name="Chartres Cathedral", description="The Fulbert Cathedral at Chartres is the earliest major work of Gothic architecture.", price=16.95),
        Product(name="Italia", description="The War had just ended when this stamp was designed.", price=18.99),
        Product(name="Gorilla", description="A magnificent gorilla on a T-shirt.", price=15.50),
    ]
    session.add_all(products)
    session.flush()

    session.add_all([
        ProductCategory(product_id=products[0].product_id, category_id=french.category_id),
        ProductCategory(product_id=products[1].product_id, category_id=french.category_id),
        ProductCategory(product_id=products[2].product_id, category_id=italian.category_id),
        ProductCategory(product_id=products[3].product_id, category_id=animal.category_id),
    ])

    size = Attribute(name="Size")
    color = Attribute(name="Color")
    session.add_all([size, color])
    session.flush()

    values = [
        AttributeValue(attribute_id=size.attribute_id, value="S"),
        AttributeValue(attribute_id=size.attribute_id, value="M"),
        AttributeValue(attribute_id=color.attribute_id, value="White"),
    ]
    session.add_all(values)
    session.flush()

    for product in products:
        for value in values:
            session.add(ProductAttribute(product_id=product.product_id, attribute_value_id=value.attribute_value_id))

    logger.info("Создан минимальный набор тестовых данных")


def check_db_health(session: Session) -> dict:
    """
    Проверка состояния базы данных.

    Returns:
        dict: Статистика по таблицам
    """
    stats = {}

    try:
        stats['departments'] = session.exec(select(func.count(Department.department_id))).one()
        stats['categories'] = session.exec(select(func.count(Category.category_id))).one()
        stats['products'] = session.exec(select(func.count(Product.product_id))).one()
        stats['status'] = 'healthy'
    except Exception as e:
        stats['status'] = 'error'
        stats['error'] = str(e)

    return stats


if __name__ == "__main__":
    from database.config import get_settings

    init_db(drop_all="--drop" in sys.argv, data_dir=get_settings().SEED_DATA_DIR)
