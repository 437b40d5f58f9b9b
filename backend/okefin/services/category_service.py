from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import ConflictError, NotFoundError
from okefin.core.logger import setup_logger
from okefin.database.database import unit_of_work
from okefin.repositories import CategoryRepository, category_repository
from okefin.utils.parse import build_pagination

logger = setup_logger("services.category")


class CategoryService:
    """Global, flat categories. Admin gating happens in the API dependencies."""

    def __init__(self, repository: CategoryRepository):
        self.repository = repository

    @staticmethod
    def to_response(category: models.Category) -> schemas.CategoryResponse:
        return schemas.CategoryResponse(id=category.category_id, nama_category=category.nama_category)

    def _get_or_404(self, db: Session, category_id: int) -> models.Category:
        category = self.repository.get(db, category_id)
        if not category:
            raise NotFoundError("category not found", message="Category not found")
        return category

    def create(self, db: Session, category_in: schemas.CategoryCreate) -> schemas.CategoryResponse:
        with unit_of_work(db):
            category = self.repository.create(db, models.Category(nama_category=category_in.nama_category))
        logger.info(f"Created category {category.category_id}: {category.nama_category}")
        return self.to_response(category)

    def get_all(self, db: Session, page: int, limit: int) -> schemas.CategoryList:
        categories, total = self.repository.get_all(db, skip=(page - 1) * limit, limit=limit)
        return schemas.CategoryList(
            categories=[self.to_response(c) for c in categories],
            pagination=build_pagination(page, limit, total),
        )

    def get(self, db: Session, category_id: int) -> schemas.CategoryResponse:
        return self.to_response(self._get_or_404(db, category_id))

    def update(self, db: Session, category_id: int, category_in: schemas.CategoryUpdate) -> schemas.CategoryResponse:
        category = self._get_or_404(db, category_id)
        with unit_of_work(db):
            if category_in.nama_category:
                category.nama_category = category_in.nama_category
            self.repository.update(db, category)
        return self.to_response(category)

    def delete(self, db: Session, category_id: int) -> None:
        category = self._get_or_404(db, category_id)
        try:
            with unit_of_work(db):
                self.repository.delete(db, category)
        except IntegrityError:
            raise ConflictError("category is still used by produk", message="Failed to delete category")
        logger.info(f"Deleted category {category_id}")

category_service = CategoryService(category_repository)
