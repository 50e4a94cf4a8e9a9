from __future__ import annotations

CATEGORY_KEYWORDS: dict[str, list[str]] = {
    "Healthtech and Wellness": [
        "pain", "health", "massage", "therapy", "wellness", "medical", "fitness",
        "recovery", "relief", "treatment", "healing", "body", "muscle", "stress",
    ],
    "Personal Care": [
        "hair", "beauty", "care", "styling", "grooming", "skin", "personal",
        "hygiene", "cosmetic", "appearance",
    ],
    "Entertainment": [
        "music", "gaming", "fun", "play", "entertainment", "audio", "video",
        "kids", "children", "game", "sound", "speaker", "headphone", "toy",
    ],
    "Kitchen Appliances": [
        "cooking", "kitchen", "food", "coffee", "appliance", "chef", "cook",
        "recipe", "meal", "dining", "beverage",
    ],
    "Home Improvement": [
        "home", "cleaning", "vacuum", "air", "smart home", "automation",
        "house", "clean", "purifier", "improvement", "maintenance",
    ],
    "Travel & Lifestyle": [
        "travel", "luggage", "backpack", "wallet", "lifestyle", "journey",
        "trip", "portable", "mobile", "bag", "suitcase", "carry", "pack",
    ],
    "Smart Mobility": [
        "mobility", "wheelchair", "scooter", "transportation", "movement",
        "vehicle", "ride", "move",
    ],
    "Security & Surveillance": [
        "security", "camera", "lock", "surveillance", "safety", "protection",
        "monitor", "guard", "secure", "watch",
    ],
}


def find_relevant_categories(query: str) -> list[str]:
    """Categories with at least one keyword occurring in the lowercase query."""
    return [
        category
        for category, keywords in CATEGORY_KEYWORDS.items()
        if any(keyword in query for keyword in keywords)
    ]
