from apps.common.repository import GenericRepository
from .models import User


class UserRepository(GenericRepository[User]):
    def __init__(self):
        super().__init__(User)

    def get_by_email(self, email: str):
        return self.model.objects.filter(email__iexact=email).first()
