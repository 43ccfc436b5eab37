from __future__ import annotations

from decimal import Decimal

from catalog.domain.models import CatalogState, Category, Product

SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(
        id=1,
        name="iPhone 15 Pro",
        category=Category.ELECTRONICS,
        price=Decimal("25000000"),
        quantity=10,
        description="Điện thoại flagship của Apple.",
    ),
    Product(
        id=2,
        name="Áo Thun Nam",
        category=Category.CLOTHING,
        price=Decimal("150000"),
        quantity=50,
        description="Áo thun cotton co dãn.",
    ),
    Product(
        id=3,
        name="Bánh Mì Việt",
        category=Category.FOOD,
        price=Decimal("20000"),
        quantity=100,
        description="Bánh mì nóng mỗi sáng.",
    ),
    Product(
        id=4,
        name="Gatsby - Văn học",
        category=Category.BOOKS,
        price=Decimal("120000"),
        quantity=20,
        description="Tiểu thuyết kinh điển.",
    ),
    Product(
        id=5,
        name="Tai nghe Bluetooth",
        category=Category.ELECTRONICS,
        price=Decimal("800000"),
        quantity=25,
        description="Tai nghe không dây, pin lâu.",
    ),
    Product(
        id=6,
        name="Quần Jean Nữ",
        category=Category.CLOTHING,
        price=Decimal("350000"),
        quantity=30,
        description="Quần jean co giãn thoải mái.",
    ),
    Product(
        id=7,
        name="Snack Khoai Tây",
        category=Category.FOOD,
        price=Decimal("25000"),
        quantity=60,
        description="Snack giòn, vị truyền thống.",
    ),
    Product(
        id=8,
        name="Sách Lập Trình TS",
        category=Category.BOOKS,
        price=Decimal("300000"),
        quantity=15,
        description="Học TypeScript từ cơ bản đến nâng cao.",
    ),
    Product(
        id=9,
        name="Sạc Dự Phòng 10k mAh",
        category=Category.ELECTRONICS,
        price=Decimal("450000"),
        quantity=40,
        description="Sạc nhanh, nhỏ gọn.",
    ),
    Product(
        id=10,
        name="Mũ Lưỡi Trai",
        category=Category.CLOTHING,
        price=Decimal("120000"),
        quantity=45,
        description="Mũ thời trang unisex.",
    ),
)


def initial_state(seed: bool = True) -> CatalogState:
    """Startup state: the sample products with next_id 11, or an empty catalog."""
    if not seed:
        return CatalogState()
    return CatalogState(products=SAMPLE_PRODUCTS, next_id=len(SAMPLE_PRODUCTS) + 1)
