from datetime import date
from typing import List, Optional

from sqlalchemy import and_, or_

from ..models.vacation_rental import VacationRental
from ..models.promotion import Promotion
from ..schemas.property import PromotionCreate
from ..utils.validation import ValidationHelpers
from .base import BaseService, BusinessRuleViolation


class PromotionService(BaseService):
    def create_promotion(self, promotion_data: PromotionCreate) -> Promotion:
        self._require_parent(
            VacationRental,
            promotion_data.vacation_rental_id,
            "Promotion",
            "vacation_rental_id",
        )
        if not ValidationHelpers.validate_date_window(
            promotion_data.start_date, promotion_data.end_date
        ):
            raise BusinessRuleViolation("Promotion must end on or after its start date")
        return self._save(Promotion(**promotion_data.dict()))

    def get_promotion(self, promotion_id: int) -> Promotion:
        return self._get_or_raise(Promotion, promotion_id)

    def active_promotions(
        self, rental_id: int, on_date: Optional[date] = None
    ) -> List[Promotion]:
        """Promotions whose window contains on_date; open ends count as unbounded"""
        self._get_or_raise(VacationRental, rental_id)
        on_date = on_date or date.today()
        return (
            self.db.query(Promotion)
            .filter(
                and_(
                    Promotion.vacation_rental_id == rental_id,
                    or_(Promotion.start_date.is_(None), Promotion.start_date <= on_date),
                    or_(Promotion.end_date.is_(None), Promotion.end_date >= on_date),
                )
            )
            .order_by(Promotion.discount_percentage.desc())
            .all()
        )

    def delete_promotion(self, promotion_id: int) -> None:
        promotion = self._get_or_raise(Promotion, promotion_id)
        self._delete(promotion)
