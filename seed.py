import random

from bricks import create_app
from bricks.extensions import db
from bricks.models import PersonalExperience, PersonalProfile, Review, User

DEFAULT_PASSWORD = "123456"

CITIES = {
    "Sao Paulo": ["Jardins", "Pinheiros", "Vila Madalena", "Moema"],
    "Rio de Janeiro": ["Copacabana", "Ipanema", "Leblon", "Botafogo"],
    "Belo Horizonte": ["Savassi", "Lourdes", "Sion"],
    "Curitiba": ["Batel", "Agua Verde", "Cabral"],
}

# name, is_male, specialties, bio
TRAINERS = [
    ("Lucas Ferreira", True, ["Hypertrophy", "Strength Training"],
     "Muscle gain specialist with a science based method. Over 500 students in 8 years."),
    ("Amanda Silva", False, ["Hypertrophy", "Strength Training"],
     "Hypertrophy coach focused on lower body development."),
    ("Carolina Mendes", False, ["Weight Loss", "Functional"],
     "Healthy, lasting weight loss. More than 300 success stories."),
    ("Bruno Almeida", True, ["Weight Loss", "Running"],
     "Fat loss and lean mass gain with real results in 12 weeks."),
    ("Mariana Souza", False, ["Functional", "Mobility"],
     "Functional training for everyday quality of life, indoor and outdoor."),
    ("Andre Ribeiro", True, ["Functional", "Running"],
     "Functional workouts that improve posture, mobility and overall strength."),
    ("Maria Helena", False, ["Seniors", "Mobility"],
     "15 years training seniors. Safety first."),
    ("Felipe Teixeira", True, ["Mobility", "Functional"],
     "Range of motion and postural correction. Physiotherapist and trainer."),
    ("Marcelo Castro", True, ["Running", "Functional"],
     "Running coach from first 5k to the marathon, with personalised plans."),
    ("Beatriz Moreira", False, ["Pilates", "Mobility"],
     "Classical and contemporary pilates instructor with a fully equipped studio."),
]

EXPERIENCE_TITLES = ["Personal Trainer", "Gym Coordinator", "Strength Coach", "Head Coach"]
COMPANIES = ["Smart Fit", "Bodytech", "Bio Ritmo", "Bluefit", "CrossFit Box", "Studio Pilates"]
REVIEW_COMMENTS = [
    "Excellent professional, very attentive.",
    "Great results in just a few months.",
    "Motivating and always on time.",
    "Workouts are challenging and well planned.",
]
RATINGS = [4, 4, 5, 5, 5]
PRICES = [80, 100, 120, 150, 180, 200]


def cref():
    state = random.choice(["SP", "RJ", "MG", "PR"])
    return f"{random.randint(1, 22):03d}.{random.randint(100000, 999999)}-G/{state}"


def seed_personal(index, name, is_male, specialties, bio):
    email = f"{name.lower().replace(' ', '.')}@bricks.app"
    if User.query.filter_by(email=email).first():
        print(f"Skipping {email}, already exists")
        return False

    city = random.choice(list(CITIES))
    gender = "men" if is_male else "women"
    user = User(
        name=name,
        email=email,
        user_type="personal",
        photo_url=f"https://randomuser.me/api/portraits/{gender}/{index}.jpg",
    )
    user.set_password(DEFAULT_PASSWORD)
    profile = PersonalProfile(
        bio=bio,
        specialties=specialties,
        city=city,
        neighborhood=random.choice(CITIES[city]),
        cref=cref(),
        average_price=random.choice(PRICES),
    )
    user.personal_profile = profile
    db.session.add(user)
    db.session.flush()

    start_year = random.randint(2008, 2016)
    for title, company in zip(random.sample(EXPERIENCE_TITLES, 2), random.sample(COMPANIES, 2)):
        end_year = start_year + random.randint(2, 5)
        db.session.add(PersonalExperience(
            personal_id=profile.id,
            title=title,
            company=company,
            start_year=start_year,
            end_year=end_year if end_year < 2024 else None,
        ))
        start_year = end_year

    for comment in random.sample(REVIEW_COMMENTS, 3):
        db.session.add(Review(personal_id=profile.id, rating=random.choice(RATINGS), comment=comment))
    db.session.flush()
    profile.recompute_rating()
    return True


app = create_app()

with app.app_context():
    created = 0
    for index, trainer in enumerate(TRAINERS, start=1):
        if seed_personal(index, *trainer):
            created += 1
    db.session.commit()

    print(f"Created {created} personal trainer(s)")
    print(f"Password for all seeded accounts: {DEFAULT_PASSWORD}")
