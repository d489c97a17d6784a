from pydantic import BaseModel, ConfigDict
from datetime import datetime
from typing import Optional
from uuid import UUID


class UserOut(BaseModel):
    id: UUID
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @property
    def label(self) -> str:
        return self.full_name or self.email or str(self.id)


class AuthSession(BaseModel):
    """Signed-in user as kept in st.session_state["auth"]."""
    user_id: UUID
    email: Optional[str] = None
    full_name: Optional[str] = None
    role: str
    access_token: str
    refresh_token: Optional[str] = None
