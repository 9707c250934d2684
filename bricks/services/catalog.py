"""Static storefront and preset workout catalogs."""
from datetime import date

EVENTS = [
    {
        "id": "ev1",
        "name": "Bricks Run - 5k & 10k",
        "description": "Official Bricks race at Ibirapuera Park. Full kit with shirt, bib and medal.",
        "image_url": "https://images.unsplash.com/photo-1552674605-db6ffd4facb5?w=800",
        "date": date(2025, 2, 15),
        "city": "Sao Paulo",
        "location": "Parque Ibirapuera",
        "distance": "5k / 10k",
        "event_type": "Street race",
        "categories": ["5k", "10k"],
        "normal_price": 120,
        "bricks_price": 89,
        "has_bricks_discount": True,
        "benefits": ["Exclusive kit", "VIP area", "Special Bricks medal"],
    },
    {
        "id": "ev2",
        "name": "Serra Trail Run Challenge",
        "description": "Demanding mountain trail in Florianopolis.",
        "image_url": "https://images.unsplash.com/photo-1551632436-cbf8dd35adfa?w=800",
        "date": date(2025, 3, 20),
        "city": "Florianopolis",
        "location": "Morro da Lagoa",
        "distance": "15k",
        "event_type": "Trail Run",
        "categories": ["15k", "21k"],
        "normal_price": 220,
        "bricks_price": 179,
        "has_bricks_discount": True,
        "benefits": ["Transport included", "Trail kit"],
    },
    {
        "id": "ev3",
        "name": "Performance Workshop - Functional Training",
        "description": "Hands-on workshop with leading coaches. Certificate included.",
        "image_url": "https://images.unsplash.com/photo-1571019614242-c5c5dee9f50b?w=800",
        "date": date(2025, 4, 10),
        "city": "Belo Horizonte",
        "location": "Centro de Convencoes",
        "distance": None,
        "event_type": "Workshop",
        "categories": ["In person"],
        "normal_price": 190,
        "bricks_price": 150,
        "has_bricks_discount": True,
        "benefits": ["Certificate", "Course material", "Coffee break"],
    },
    {
        "id": "ev4",
        "name": "Triathlon Experience",
        "description": "Try triathlon in a safe environment with full technical support.",
        "image_url": "https://images.unsplash.com/photo-1530549387789-4c1017266635?w=800",
        "date": date(2025, 5, 5),
        "city": "Rio de Janeiro",
        "location": "Praia de Copacabana",
        "distance": None,
        "event_type": "Triathlon",
        "categories": ["Sprint", "Olympic"],
        "normal_price": 350,
        "bricks_price": 310,
        "has_bricks_discount": True,
        "benefits": ["Exclusive transition area", "Technical support"],
    },
    {
        "id": "ev5",
        "name": "Night Run Curitiba - Neon Edition",
        "description": "Neon themed night race with music.",
        "image_url": "https://images.unsplash.com/photo-1571008887538-b36bb32f4571?w=800",
        "date": date(2025, 6, 21),
        "city": "Curitiba",
        "location": "Parque Barigui",
        "distance": "5k",
        "event_type": "Night Run",
        "categories": ["5k"],
        "normal_price": 140,
        "bricks_price": 110,
        "has_bricks_discount": True,
        "benefits": ["Neon kit", "After party"],
    },
]

PRODUCTS = [
    {
        "id": "prod1",
        "name": "Bricks Whey Protein - Vanilla",
        "brand": "Bricks Nutrition",
        "description": "25g of protein per serving, natural vanilla flavour.",
        "image_url": "https://images.unsplash.com/photo-1579722821273-0f6c1e1e4e9b?w=800",
        "category": "Supplements",
        "normal_price": 169,
        "bricks_price": 149,
        "has_bricks_discount": True,
        "sizes": [],
        "tags": ["Best seller"],
        "in_stock": True,
    },
    {
        "id": "prod2",
        "name": "Bricks Performance Dry-Fit Shirt",
        "brand": "Bricks Wear",
        "description": "High performance dry-fit shirt.",
        "image_url": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=800",
        "category": "Fitness Apparel",
        "normal_price": 79,
        "bricks_price": None,
        "has_bricks_discount": False,
        "sizes": ["S", "M", "L", "XL"],
        "tags": ["New"],
        "in_stock": True,
    },
    {
        "id": "prod3",
        "name": "Bricks Stainless Steel Bottle 1L",
        "brand": "Bricks Gear",
        "description": "Keeps drinks cold for up to 24 hours.",
        "image_url": "https://images.unsplash.com/photo-1602143407151-7111542de6e8?w=800",
        "category": "Accessories",
        "normal_price": 129,
        "bricks_price": 109,
        "has_bricks_discount": True,
        "sizes": [],
        "tags": ["Bricks discount"],
        "in_stock": True,
    },
    {
        "id": "prod4",
        "name": "Heavy Resistance Band",
        "brand": "Bricks Training",
        "description": "Heavy resistance band for functional training.",
        "image_url": "https://images.unsplash.com/photo-1598289431512-b97b0917affc?w=800",
        "category": "Equipment",
        "normal_price": 39,
        "bricks_price": None,
        "has_bricks_discount": False,
        "sizes": [],
        "tags": [],
        "in_stock": True,
    },
    {
        "id": "prod5",
        "name": "Bricks Functional Kit - Rope, Mini Bands and Cones",
        "brand": "Bricks Training",
        "description": "Complete kit for functional training at home or outdoors.",
        "image_url": "https://images.unsplash.com/photo-1571019613454-1cb2f99b2d8b?w=800",
        "category": "Equipment",
        "normal_price": 199,
        "bricks_price": 179,
        "has_bricks_discount": True,
        "sizes": [],
        "tags": ["Bricks discount", "Kit"],
        "in_stock": True,
    },
    {
        "id": "prod6",
        "name": "Bricks Pro Leggings",
        "brand": "Bricks Wear",
        "description": "High compression, squat-proof fabric.",
        "image_url": "https://images.unsplash.com/photo-1506629082955-511b1aa562c8?w=800",
        "category": "Fitness Apparel",
        "normal_price": 149,
        "bricks_price": None,
        "has_bricks_discount": False,
        "sizes": ["S", "M", "L"],
        "tags": ["New"],
        "in_stock": True,
    },
]


def _exercise(workout_id, index, name, muscle_group, equipment, sets, reps=None,
              time_in_seconds=None, rest_time_seconds=None, weight=None):
    return {
        "id": f"{workout_id}-e{index + 1}",
        "exercise_name": name,
        "muscle_group": muscle_group,
        "equipment": equipment,
        "sets": sets,
        "reps": reps,
        "weight": weight,
        "time_in_seconds": time_in_seconds,
        "rest_time_seconds": rest_time_seconds,
        "video_url": None,
        "observations": None,
        "order_index": index,
    }


TRENDING_WORKOUTS = [
    {
        "id": "trend-1",
        "name": "Intense Full Body HIIT",
        "objective": "weight_loss",
        "level": "advanced",
        "description": "Full HIIT session for maximum fat burn",
        "frequency": "3x per week",
        "duration": 45,
        "tags": ["HIIT", "Full Body", "Cardio"],
        "usage_count": 156,
        "student_count": 89,
        "rating": 4.8,
        "personal_name": "Carlos Fitness",
        "exercises": [
            _exercise("trend-1", 0, "Burpees", "Full Body", "Bodyweight", 4, reps=12, rest_time_seconds=30),
            _exercise("trend-1", 1, "Mountain Climbers", "Core", "Bodyweight", 4, time_in_seconds=45, rest_time_seconds=20),
            _exercise("trend-1", 2, "Jump Squats", "Legs", "Bodyweight", 4, reps=15, rest_time_seconds=30),
        ],
    },
    {
        "id": "trend-2",
        "name": "Hypertrophy - Chest and Triceps",
        "objective": "hypertrophy",
        "level": "intermediate",
        "description": "Muscle gain session for chest and triceps",
        "frequency": "2x per week",
        "duration": 60,
        "tags": ["Hypertrophy", "Upper Body", "Push"],
        "usage_count": 234,
        "student_count": 145,
        "rating": 4.9,
        "personal_name": "Amanda Strong",
        "exercises": [
            _exercise("trend-2", 0, "Flat Bench Press", "Chest", "Barbell", 4, reps=10, weight=70, rest_time_seconds=90),
            _exercise("trend-2", 1, "Incline Bench Press", "Chest", "Dumbbell", 4, reps=12, weight=24, rest_time_seconds=75),
            _exercise("trend-2", 2, "Triceps Pushdown", "Triceps", "Machine", 3, reps=15, rest_time_seconds=60),
        ],
    },
    {
        "id": "trend-3",
        "name": "ABC Split for Beginners",
        "objective": "conditioning",
        "level": "beginner",
        "description": "ABC split for people just starting out",
        "frequency": "3x per week",
        "duration": 50,
        "tags": ["ABC", "Beginners", "Full Body"],
        "usage_count": 312,
        "student_count": 201,
        "rating": 4.7,
        "personal_name": "Pedro Coach",
        "exercises": [
            _exercise("trend-3", 0, "Bodyweight Squat", "Legs", "Bodyweight", 3, reps=15, rest_time_seconds=60),
            _exercise("trend-3", 1, "Push-up", "Chest", "Bodyweight", 3, reps=10, rest_time_seconds=60),
        ],
    },
    {
        "id": "trend-4",
        "name": "Core Power",
        "objective": "strength",
        "level": "intermediate",
        "description": "Complete core and abs strengthening",
        "frequency": "4x per week",
        "duration": 30,
        "tags": ["Core", "Abs", "Functional"],
        "usage_count": 178,
        "student_count": 98,
        "rating": 4.6,
        "personal_name": "Julia Trainer",
        "exercises": [
            _exercise("trend-4", 0, "Plank", "Core", "Bodyweight", 4, time_in_seconds=60, rest_time_seconds=30),
            _exercise("trend-4", 1, "Russian Twist", "Obliques", "Bodyweight", 3, reps=20, rest_time_seconds=30),
        ],
    },
]


def _serialize_event(event):
    return dict(event, date=event["date"].isoformat())


def list_events(city=None, event_type=None):
    events = EVENTS
    if city:
        events = [e for e in events if city.lower() in e["city"].lower()]
    if event_type:
        events = [e for e in events if e["event_type"] == event_type]
    return [_serialize_event(e) for e in events]


def get_event(event_id):
    for event in EVENTS:
        if event["id"] == event_id:
            return _serialize_event(event)
    return None


def list_products(category=None):
    if category:
        return [p for p in PRODUCTS if p["category"] == category]
    return list(PRODUCTS)


def get_product(product_id):
    return next((p for p in PRODUCTS if p["id"] == product_id), None)


def list_trending(objective=None, level=None):
    workouts = TRENDING_WORKOUTS
    if objective:
        workouts = [w for w in workouts if w["objective"] == objective]
    if level:
        workouts = [w for w in workouts if w["level"] == level]
    return list(workouts)


def get_trending(workout_id):
    return next((w for w in TRENDING_WORKOUTS if w["id"] == workout_id), None)
