# grocery_store/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import Session

from grocery_store.data.database import transaction
from grocery_store.data.models import CartItemModel, ProductModel
from grocery_store.domain.enums import Category
from grocery_store.repos.product_repo import ProductRepo
from grocery_store.utils.logging import get_logger

logger = get_logger(__name__)

_IMG = "https://images.unsplash.com/{}?w=400&h=300&fit=crop&crop=center"

SAMPLE_PRODUCTS = [
    ("Fresh Apples", Category.FRUITS, "3.99", "photo-1560806887-1e4cd0b6cbd6",
     "Crisp and sweet red apples, perfect for snacking or baking."),
    ("Organic Bananas", Category.FRUITS, "2.49", "photo-1571771894821-ce9b6c11b08e",
     "Naturally ripened organic bananas, rich in potassium."),
    ("Fresh Oranges", Category.FRUITS, "4.99", "photo-1547514701-42782101795e",
     "Juicy navel oranges packed with vitamin C."),
    ("Strawberries", Category.FRUITS, "5.99", "photo-1464965911861-746a04b4bca6",
     "Sweet and juicy strawberries, perfect for desserts."),
    ("Fresh Carrots", Category.VEGETABLES, "1.99", "photo-1445282768818-728615cc910a",
     "Crunchy orange carrots, great for snacking or cooking."),
    ("Organic Spinach", Category.VEGETABLES, "3.49", "photo-1576045057995-568f588f82fb",
     "Fresh organic spinach leaves, perfect for salads."),
    ("Bell Peppers", Category.VEGETABLES, "4.49", "photo-1563565375-f3fdfdbefa83",
     "Colorful bell peppers, sweet and crunchy."),
    ("Broccoli", Category.VEGETABLES, "2.99", "photo-1459411621453-7b03977f4bfc",
     "Fresh green broccoli crowns, rich in vitamins."),
    ("Whole Milk", Category.DAIRY, "3.29", "photo-1563636619-e9143da7973b",
     "Fresh whole milk from local farms."),
    ("Greek Yogurt", Category.DAIRY, "5.99", "photo-1488477181946-6428a0291777",
     "Creamy Greek yogurt, high in protein."),
    ("Cheddar Cheese", Category.DAIRY, "4.99", "photo-1618164436241-4473940d1f5c",
     "Aged sharp cheddar cheese."),
    ("Organic Butter", Category.DAIRY, "6.49", "photo-1589985270826-4b7bb135bc9d",
     "Rich organic butter made from grass-fed cream."),
    ("Orange Juice", Category.BEVERAGES, "4.99", "photo-1621506289937-a8e4df240d0b",
     "Freshly squeezed orange juice, no added sugar."),
    ("Sparkling Water", Category.BEVERAGES, "2.99", "photo-1523362628745-0c100150b504",
     "Refreshing sparkling mineral water."),
    ("Green Tea", Category.BEVERAGES, "7.99", "photo-1556679343-c7306c1976bc",
     "Premium loose leaf green tea."),
    ("Coffee Beans", Category.BEVERAGES, "12.99", "photo-1559056199-641a0ac8b55e",
     "Freshly roasted whole coffee beans."),
]

# (user_id, indeks produktu w SAMPLE_PRODUCTS, ilosc)
SAMPLE_CART_ITEMS = [
    ("user123", 0, 2),   # 2x Fresh Apples
    ("user123", 1, 1),   # 1x Organic Bananas
    ("user123", 8, 1),   # 1x Whole Milk
    ("user123", 12, 3),  # 3x Orange Juice
    ("user456", 2, 4),   # 4x Fresh Oranges
    ("user456", 6, 2),   # 2x Bell Peppers
]


def seed_sample_data(db: Session) -> bool:
    """Laduje przykladowe dane tylko gdy katalog jest pusty. True jesli cos dodano."""
    if ProductRepo(db).count() > 0:
        return False

    with transaction(db):
        products = [
            ProductModel(
                name=name,
                category=category,
                price=Decimal(price),
                image_url=_IMG.format(photo),
                description=description,
            )
            for name, category, price, photo, description in SAMPLE_PRODUCTS
        ]
        db.add_all(products)
        db.flush()

        db.add_all(
            CartItemModel(user_id=user_id, product_id=products[idx].id, quantity=qty)
            for user_id, idx, qty in SAMPLE_CART_ITEMS
        )

    logger.info(
        f"Zaladowano {len(SAMPLE_PRODUCTS)} produktow i {len(SAMPLE_CART_ITEMS)} linii koszykow"
    )
    return True
