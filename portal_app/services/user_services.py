from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from models.users_models import UserProfile
from schemas.user_schemas import UserOut
from utils.db_transaction import transactional


def get_customers(db: Session) -> list[UserOut]:
    users = db.scalars(select(UserProfile).order_by(UserProfile.full_name)).all()
    return [UserOut.model_validate(u) for u in users]

@transactional
def ensure_profile(db: Session, user_id, email: Optional[str] = None, full_name: Optional[str] = None) -> UserProfile:
    """
    Profile row keyed by the auth user id; created on first sign-in and
    filled in where the auth record knows more than the row does.
    """
    profile = db.get(UserProfile, user_id)
    if profile is None:
        profile = UserProfile(id=user_id, email=email, full_name=full_name)
        db.add(profile)
    else:
        profile.email = profile.email or email
        profile.full_name = profile.full_name or full_name
    db.commit()
    return profile
