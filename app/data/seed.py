# app/data/seed.py
from datetime import datetime, timezone
from decimal import Decimal

from app.data.store import KeyValueStore
from app.domain.enums import ProductCategory
from app.domain.schemas import Product, NutritionalInfo

# (id, nazwa, opis, kategoria, cena, stock, skladniki, alergeny, tagi, wartosci odzywcze)
PRODUCTS = [
    (
        "vb-001", "Acai Berry Smoothie Bowl",
        "Thick acai blend topped with banana, granola and fresh berries.",
        ProductCategory.SMOOTHIE_BOWL, "12.99", 25,
        ["acai", "banana", "blueberries", "granola", "almond milk"], ["tree nuts"],
        ["gluten-free", "antioxidant", "bestseller"],
        ("1 bowl (350g)", 420, 8, 68, 14, 11, 32),
    ),
    (
        "vb-002", "Green Power Smoothie Bowl",
        "Spinach, mango and pineapple with hemp seeds and coconut flakes.",
        ProductCategory.SMOOTHIE_BOWL, "11.49", 18,
        ["spinach", "mango", "pineapple", "hemp seeds", "coconut"], [],
        ["gluten-free", "nut-free", "high-fiber"],
        ("1 bowl (340g)", 380, 10, 62, 12, 9, 38),
    ),
    (
        "vb-003", "Fluffy Blueberry Pancakes",
        "Stack of three oat-milk pancakes with maple syrup and blueberries.",
        ProductCategory.PANCAKES_WAFFLES, "10.99", 30,
        ["wheat flour", "oat milk", "blueberries", "maple syrup"], ["gluten"],
        ["classic", "sweet", "bestseller"],
        ("3 pancakes (280g)", 540, 11, 96, 12, 5, 34),
    ),
    (
        "vb-004", "Belgian Waffle with Berries",
        "Crisp waffle with coconut whipped cream and mixed berries.",
        ProductCategory.PANCAKES_WAFFLES, "11.99", 15,
        ["wheat flour", "coconut cream", "strawberries", "raspberries"], ["gluten"],
        ["sweet", "weekend-special"],
        ("1 waffle (260g)", 560, 9, 78, 24, 6, 28),
    ),
    (
        "vb-005", "Southwest Tofu Scramble",
        "Turmeric tofu scramble with black beans, peppers and salsa.",
        ProductCategory.TOFU_SCRAMBLE, "13.49", 20,
        ["tofu", "black beans", "bell pepper", "turmeric", "salsa"], ["soy"],
        ["high-protein", "savory", "gluten-free"],
        ("1 plate (380g)", 460, 28, 38, 22, 12, 6),
    ),
    (
        "vb-006", "Maple Cinnamon Oatmeal",
        "Steel-cut oats with maple, cinnamon, walnuts and sliced apple.",
        ProductCategory.OATMEAL_PORRIDGE, "8.99", 40,
        ["oats", "maple syrup", "cinnamon", "walnuts", "apple"], ["tree nuts"],
        ["warm", "high-fiber", "classic"],
        ("1 bowl (320g)", 390, 9, 64, 12, 8, 22),
    ),
    (
        "vb-007", "Breakfast Burrito Supreme",
        "Flour tortilla stuffed with tofu scramble, potatoes, avocado and beans.",
        ProductCategory.BREAKFAST_BURRITO, "12.49", 22,
        ["flour tortilla", "tofu", "potatoes", "avocado", "pinto beans"], ["gluten", "soy"],
        ["high-protein", "savory", "hearty"],
        ("1 burrito (420g)", 680, 26, 82, 26, 14, 5),
    ),
    (
        "vb-008", "Classic Avocado Toast",
        "Sourdough with smashed avocado, cherry tomatoes and chili flakes.",
        ProductCategory.AVOCADO_TOAST, "9.99", 35,
        ["sourdough", "avocado", "cherry tomatoes", "chili flakes", "lemon"], ["gluten"],
        ["savory", "classic", "bestseller"],
        ("2 slices (250g)", 410, 10, 44, 22, 12, 4),
    ),
    (
        "vb-009", "Mango Coconut Chia Pudding",
        "Chia seeds soaked overnight in coconut milk, layered with mango.",
        ProductCategory.CHIA_PUDDING, "7.99", 28,
        ["chia seeds", "coconut milk", "mango", "agave"], [],
        ["gluten-free", "nut-free", "make-ahead"],
        ("1 jar (240g)", 320, 7, 34, 18, 13, 19),
    ),
    (
        "vb-010", "Crunchy Nut Granola",
        "House-baked granola with almonds, pecans and oat yogurt.",
        ProductCategory.GRANOLA_MUESLI, "8.49", 0,
        ["oats", "almonds", "pecans", "oat yogurt", "maple syrup"], ["tree nuts"],
        ["crunchy", "sweet"],
        ("1 bowl (220g)", 480, 12, 58, 22, 8, 20),
    ),
    (
        "vb-011", "Tropical Fruit Bowl",
        "Papaya, pineapple, kiwi and passion fruit with lime and mint.",
        ProductCategory.FRUIT_BOWL, "9.49", 16,
        ["papaya", "pineapple", "kiwi", "passion fruit", "mint"], [],
        ["gluten-free", "nut-free", "light"],
        ("1 bowl (300g)", 210, 3, 52, 1, 8, 38),
    ),
    (
        "vb-012", "Oat Milk Matcha Latte",
        "Ceremonial-grade matcha whisked with steamed oat milk.",
        ProductCategory.BEVERAGES, "5.49", 50,
        ["matcha", "oat milk", "agave"], [],
        ["drink", "caffeine", "gluten-free"],
        ("12 fl oz", 140, 3, 22, 5, 2, 12),
    ),
]


def build_product(row, now: datetime) -> Product:
    pid, name, desc, category, price, stock, ingredients, allergens, tags, nutrition = row
    serving, calories, protein, carbs, fat, fiber, sugar = nutrition
    return Product(
        id=pid,
        name=name,
        description=desc,
        category=category,
        price=Decimal(price),
        currency="USD",
        image_url=f"/images/products/{pid}.jpg",
        in_stock=stock > 0,
        stock_quantity=stock,
        ingredients=ingredients,
        allergens=allergens,
        tags=tags,
        nutritional_info=NutritionalInfo(
            serving_size=serving,
            calories=calories,
            protein=protein,
            carbohydrates=carbs,
            fat=fat,
            fiber=fiber,
            sugar=sugar,
        ),
        created_at=now,
        updated_at=now,
    )


def seed_catalog(store: KeyValueStore[Product]) -> None:
    # not forcing: only seed if empty
    if store.values():
        return
    now = datetime.now(timezone.utc)
    for row in PRODUCTS:
        product = build_product(row, now)
        store.put(product.id, product)
