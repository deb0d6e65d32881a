import logging
import random
from datetime import datetime, timedelta

from celery import Celery
from faker import Faker
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import database, models
from .api.users import hash_password
from .core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

celery_app = Celery("postboard", broker=settings.CELERY_BROKER_URL)

BATCH_SIZE = 1000
DEMO_PASSWORD = "password123"


def chunk_list(lst, chunk_size):
    """Divide uma lista em chunks de tamanho específico"""
    return [lst[i:i + chunk_size] for i in range(0, len(lst), chunk_size)]


def build_users(fake: Faker, start_idx: int, count: int):
    password_hash = hash_password(DEMO_PASSWORD)
    return [{
        "id": models.new_id(),
        "username": f"user_{i}_{fake.user_name()}",
        "email": f"user_{i}_{fake.email()}",
        "password_hash": password_hash,
        "bio": fake.sentence(),
        "profile_image": fake.image_url(),
        "created_at": models.utcnow(),
    } for i in range(start_idx, start_idx + count)]


def build_posts(fake: Faker, user_id: str, count: int, like_pool=()):
    base_date = datetime.now() - timedelta(days=365)
    posts = []
    for _ in range(count):
        # Amostra sem reposição: cada usuário curte um post no máximo uma vez.
        likes = random.sample(list(like_pool), k=random.randint(0, len(like_pool)))
        posts.append({
            "id": models.new_id(),
            "user_id": user_id,
            "title": fake.sentence(nb_words=4).rstrip("."),
            "caption": fake.text(max_nb_chars=200),
            "image": fake.image_url(),
            "likes": likes,
            "likes_count": len(likes),
            "created_at": base_date + timedelta(
                days=random.randint(0, 365),
                hours=random.randint(0, 23),
                minutes=random.randint(0, 59)
            ),
        })
    return posts


def insert_users(db: Session, users_data):
    try:
        db.bulk_insert_mappings(models.User, users_data)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.error("Seeding aborted: username or email already exists")
        raise


def seed_demo_data(db: Session, users: int = 10, posts_per_user: int = 5,
                   fake: Faker = None, start_idx: int = None):
    """Insere usuários falsos com seus posts. Retorna quantos de cada foram criados.

    Os usernames são numerados a partir de start_idx (por padrão, o total atual
    de usuários), então execuções repetidas não colidem.
    """
    fake = fake or Faker()
    if start_idx is None:
        start_idx = db.query(models.User).count()
    users_data = build_users(fake, start_idx, users)
    insert_users(db, users_data)

    user_ids = [u["id"] for u in users_data]
    total_posts = 0
    for user_id in user_ids:
        posts = build_posts(fake, user_id, posts_per_user, like_pool=user_ids)
        for batch in chunk_list(posts, BATCH_SIZE):
            db.bulk_insert_mappings(models.Post, batch)
            db.commit()
        total_posts += len(posts)

    logger.info("Seeded %d users and %d posts", len(user_ids), total_posts)
    return {"users": len(user_ids), "posts": total_posts}


@celery_app.task(name="seed_users")
def seed_users(start_idx, count):
    """Gera um chunk de usuários e retorna seus IDs"""
    db = database.SessionLocal()
    try:
        users_data = build_users(Faker(), start_idx, count)
        insert_users(db, users_data)
        return [u["id"] for u in users_data]
    finally:
        db.close()


@celery_app.task(name="seed_posts_for_users")
def seed_posts_for_users(user_ids, posts_per_user=5):
    """Gera posts para um grupo de usuários, curtidos pelo próprio grupo"""
    fake = Faker()
    db = database.SessionLocal()
    try:
        all_posts = []
        for user_id in user_ids:
            all_posts.extend(build_posts(fake, user_id, posts_per_user, like_pool=user_ids))
        for batch in chunk_list(all_posts, BATCH_SIZE):
            db.bulk_insert_mappings(models.Post, batch)
            db.commit()
        return len(all_posts)
    finally:
        db.close()
