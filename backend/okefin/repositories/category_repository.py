from typing import List, Optional, Tuple

from sqlalchemy.orm import Session
from okefin import models

class CategoryRepository:
    def get(self, db: Session, category_id: int) -> Optional[models.Category]:
        return db.query(models.Category).filter(models.Category.category_id == category_id).first()

    def get_all(self, db: Session, skip: int = 0, limit: int = 10) -> Tuple[List[models.Category], int]:
        query = db.query(models.Category)
        total = query.count()
        categories = query.order_by(models.Category.category_id).offset(skip).limit(limit).all()
        return categories, total

    def exists(self, db: Session, category_id: int) -> bool:
        return db.query(models.Category).filter(models.Category.category_id == category_id).count() > 0

    def create(self, db: Session, category: models.Category) -> models.Category:
        db.add(category)
        db.flush()
        return category

    def update(self, db: Session, category: models.Category) -> models.Category:
        db.add(category)
        db.flush()
        return category

    def delete(self, db: Session, category: models.Category) -> None:
        db.delete(category)
        db.flush()

category_repository = CategoryRepository()
