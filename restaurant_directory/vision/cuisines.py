"""Cuisine names used in the restaurant dataset, as image labels may spell them."""

CUISINES: tuple[str, ...] = (
    "Afghani",
    "African",
    "American",
    "Andhra",
    "Arabian",
    "Asian",
    "Bakery",
    "BBQ",
    "Bengali",
    "Beverages",
    "Biryani",
    "Brazilian",
    "British",
    "Bubble Tea",
    "Burger",
    "Burmese",
    "Cafe",
    "Chettinad",
    "Chinese",
    "Coffee",
    "Continental",
    "Desserts",
    "European",
    "Fast Food",
    "Finger Food",
    "French",
    "German",
    "Goan",
    "Greek",
    "Healthy Food",
    "Hot Dog",
    "Hyderabadi",
    "Ice Cream",
    "Indonesian",
    "Italian",
    "Japanese",
    "Juices",
    "Kebab",
    "Kerala",
    "Korean",
    "Lebanese",
    "Malaysian",
    "Mediterranean",
    "Mexican",
    "Middle Eastern",
    "Mithai",
    "Modern Indian",
    "Momos",
    "Mughlai",
    "North Eastern",
    "North Indian",
    "Pizza",
    "Portuguese",
    "Rajasthani",
    "Raw Meats",
    "Salad",
    "Sandwich",
    "Seafood",
    "South Indian",
    "Spanish",
    "Steak",
    "Street Food",
    "Sushi",
    "Tea",
    "Tex-Mex",
    "Thai",
    "Tibetan",
    "Turkish",
    "Vietnamese",
    "Wraps",
)
