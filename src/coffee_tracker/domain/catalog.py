"""Static drink catalog used for recipe customization."""

from dataclasses import dataclass, field

SUGAR_GRAMS_PER_SWEETNESS = 4
CALORIES_PER_SUGAR_GRAM = 4
MAX_SWEETNESS_LEVEL = 5


@dataclass(frozen=True)
class CoffeeType:
    """Base drink with its caffeine and calorie content."""

    id: str
    name: str
    description: str
    base_caffeine_mg: int
    base_calories: int


@dataclass(frozen=True)
class MilkType:
    """Milk option added to a drink."""

    id: str
    name: str
    calories_per_serving: int
    protein_g: float


@dataclass(frozen=True)
class Topping:
    """Optional add-in for a drink."""

    id: str
    name: str
    caffeine_mg: int
    calories: int


@dataclass(frozen=True)
class Catalog:
    """Lookup tables for coffees, milks and toppings."""

    coffee_types: tuple[CoffeeType, ...]
    milk_types: tuple[MilkType, ...]
    toppings: tuple[Topping, ...]
    topping_sugar_g: dict[str, int] = field(default_factory=dict)

    def find_coffee(self, coffee_type_id: str) -> CoffeeType | None:
        """Return the coffee type for an id, if present."""
        return next((c for c in self.coffee_types if c.id == coffee_type_id), None)

    def find_milk(self, milk_type_id: str) -> MilkType | None:
        """Return the milk type for an id, if present."""
        return next((m for m in self.milk_types if m.id == milk_type_id), None)

    def find_topping(self, topping_id: str) -> Topping | None:
        """Return the topping for an id, if present."""
        return next((t for t in self.toppings if t.id == topping_id), None)


COFFEE_TYPES = (
    CoffeeType("espresso", "Espresso", "Bold & intense", 150, 5),
    CoffeeType("latte", "Latte", "Smooth & creamy", 100, 180),
    CoffeeType("cappuccino", "Cappuccino", "Rich & frothy", 120, 120),
    CoffeeType("americano", "Americano", "Simple & strong", 120, 10),
    CoffeeType("cold-brew", "Cold Brew", "Refreshing & smooth", 200, 5),
    CoffeeType("macchiato", "Macchiato", "Espresso marked with foam", 140, 80),
    CoffeeType("mocha", "Mocha", "Chocolate coffee indulgence", 90, 250),
    CoffeeType("frappuccino", "Frappuccino", "Blended iced coffee treat", 95, 240),
    CoffeeType(
        "turkish-coffee", "Turkish Coffee", "Traditional unfiltered brew", 160, 8
    ),
    CoffeeType("pour-over", "Pour Over", "Manual brewing precision", 130, 5),
    CoffeeType("french-press", "French Press", "Full immersion brewing", 110, 8),
    CoffeeType("aeropress", "AeroPress", "Pressure extraction method", 125, 5),
)

MILK_TYPES = (
    MilkType("whole", "Whole Milk", 60, 3),
    MilkType("skim", "Skim Milk", 35, 3.5),
    MilkType("almond", "Almond Milk", 20, 1),
    MilkType("oat", "Oat Milk", 45, 1.5),
    MilkType("coconut", "Coconut Milk", 35, 0.5),
    MilkType("soy", "Soy Milk", 40, 3),
    MilkType("rice", "Rice Milk", 50, 0.5),
    MilkType("cashew", "Cashew Milk", 25, 1),
    MilkType("macadamia", "Macadamia Milk", 25, 1),
    MilkType("hemp", "Hemp Milk", 30, 2),
    MilkType("pea", "Pea Protein Milk", 35, 4),
    MilkType("lactose-free", "Lactose-Free Milk", 50, 3),
)

TOPPINGS = (
    Topping("cinnamon", "Cinnamon", 0, 2),
    Topping("cocoa-powder", "Cocoa Powder", 2, 10),
    Topping("whipped-cream", "Whipped Cream", 0, 50),
    Topping("vanilla-syrup", "Vanilla Syrup", 0, 30),
    Topping("caramel-syrup", "Caramel Syrup", 0, 35),
    Topping("hazelnut-syrup", "Hazelnut Syrup", 0, 30),
    Topping("chocolate-chips", "Chocolate Chips", 3, 25),
    Topping("marshmallows", "Marshmallows", 0, 40),
    Topping("nutmeg", "Nutmeg", 0, 1),
    Topping("cardamom", "Cardamom", 0, 2),
    Topping("sea-salt", "Sea Salt", 0, 0),
    Topping("coconut-flakes", "Coconut Flakes", 0, 15),
    Topping("honey-drizzle", "Honey Drizzle", 0, 25),
    Topping("maple-syrup", "Maple Syrup", 0, 35),
    Topping("lavender", "Lavender", 0, 0),
    Topping("espresso-powder", "Espresso Powder", 25, 5),
)

# Grams of sugar contributed by sweet toppings, on top of their calories.
TOPPING_SUGAR_G = {
    "vanilla-syrup": 8,
    "caramel-syrup": 8,
    "hazelnut-syrup": 8,
    "honey-drizzle": 8,
    "maple-syrup": 8,
    "marshmallows": 6,
    "chocolate-chips": 4,
}

DEFAULT_CATALOG = Catalog(
    coffee_types=COFFEE_TYPES,
    milk_types=MILK_TYPES,
    toppings=TOPPINGS,
    topping_sugar_g=TOPPING_SUGAR_G,
)
