from sqlalchemy.orm import Session

from okefin import models, schemas
from okefin.core.exceptions import NotFoundError, ValidationFailedError
from okefin.core.logger import setup_logger
from okefin.database.database import unit_of_work
from okefin.repositories import (
    AlamatRepository,
    ProdukRepository,
    TrxRepository,
    alamat_repository,
    produk_repository,
    trx_repository
)
from okefin.schemas import TrxStatusEnum
from okefin.utils.parse import build_pagination, generate_invoice_code

logger = setup_logger("services.trx")

# pending may move on once, completed and cancelled are final
ALLOWED_TRANSITIONS = {
    TrxStatusEnum.pending: {TrxStatusEnum.completed, TrxStatusEnum.cancelled},
    TrxStatusEnum.completed: set(),
    TrxStatusEnum.cancelled: set(),
}


class TrxService:
    def __init__(self, repository: TrxRepository, produk: ProdukRepository, alamat: AlamatRepository):
        self.repository = repository
        self.produk = produk
        self.alamat = alamat

    def to_response(self, db: Session, trx: models.Trx) -> schemas.TrxResponse:
        details = []
        for detail in self.repository.get_details(db, trx.trx_id):
            log = detail.log_produk
            details.append(schemas.DetailTrxResponse(
                id=detail.detail_trx_id,
                produk_id=log.produk_id,
                nama_produk=log.nama_produk,
                toko_id=detail.toko_id,
                jumlah=detail.kuantitas,
                harga=detail.harga_total / detail.kuantitas,
                harga_total=detail.harga_total,
            ))
        return schemas.TrxResponse(
            id=trx.trx_id,
            kode_invoice=trx.kode_invoice,
            alamat_id=trx.alamat_pengiriman,
            user_id=trx.user_id,
            total_harga=trx.harga_total,
            status=trx.status,
            created_at=trx.created_at,
            updated_at=trx.updated_at,
            details=details,
        )

    def _get_owned(self, db: Session, trx_id: int, user_id: int) -> models.Trx:
        trx = self.repository.get_owned(db, trx_id, user_id)
        if not trx:
            raise NotFoundError("transaksi not found or access denied", message="Transaksi not found")
        return trx

    def create(self, db: Session, user_id: int, trx_in: schemas.TrxCreate) -> schemas.TrxResponse:
        """
        Place an order.

        The claimed total must equal the sum of the line totals exactly. The
        order row, one snapshot and one detail row per line, and every stock
        decrement are written in a single transaction: a missing produk or a
        short stock on any line leaves no trace of the order.
        """
        calculated_total = sum(d.harga * d.jumlah for d in trx_in.details)
        if calculated_total != trx_in.total_harga:
            raise ValidationFailedError("total harga does not match sum of detail harga")

        if not self.alamat.is_owned_by(db, trx_in.alamat_id, user_id):
            raise NotFoundError("alamat not found or access denied", message="Alamat not found")

        with unit_of_work(db):
            trx = self.repository.create(db, models.Trx(
                user_id=user_id,
                alamat_pengiriman=trx_in.alamat_id,
                harga_total=trx_in.total_harga,
                kode_invoice=generate_invoice_code(),
                status=TrxStatusEnum.pending,
            ))

            for line in trx_in.details:
                produk = self.produk.get(db, line.produk_id, for_update=True)
                if not produk:
                    raise NotFoundError(f"produk {line.produk_id} not found", message="Produk not found")
                if produk.stok < line.jumlah:
                    raise ValidationFailedError(f"insufficient stock for produk ID {line.produk_id}")

                log = self.produk.create_log(db, produk)
                self.repository.create_detail(db, models.DetailTrx(
                    trx_id=trx.trx_id,
                    log_produk_id=log.log_produk_id,
                    toko_id=produk.toko_id,
                    kuantitas=line.jumlah,
                    harga_total=line.harga * line.jumlah,
                ))
                # Re-checked in SQL so a concurrent order cannot push the stock below zero
                if not self.produk.decrement_stock(db, produk.produk_id, line.jumlah):
                    raise ValidationFailedError(f"insufficient stock for produk ID {line.produk_id}")
                logger.debug(f"Reserved {line.jumlah} of produk {line.produk_id} for {trx.kode_invoice}")

        logger.info(f"User {user_id} placed order {trx.kode_invoice} with {len(trx_in.details)} line(s)")
        return self.to_response(db, trx)

    def get_by_user(self, db: Session, user_id: int, page: int, limit: int) -> schemas.TrxList:
        trx, total = self.repository.get_by_user(db, user_id, skip=(page - 1) * limit, limit=limit)
        return schemas.TrxList(
            transaksi=[self.to_response(db, t) for t in trx],
            pagination=build_pagination(page, limit, total),
        )

    def get(self, db: Session, trx_id: int, user_id: int) -> schemas.TrxResponse:
        return self.to_response(db, self._get_owned(db, trx_id, user_id))

    def update_status(self, db: Session, trx_id: int, user_id: int, trx_in: schemas.TrxUpdate) -> schemas.TrxResponse:
        trx = self._get_owned(db, trx_id, user_id)
        current = TrxStatusEnum(trx.status)
        if trx_in.status != current:
            if trx_in.status not in ALLOWED_TRANSITIONS[current]:
                raise ValidationFailedError(f"cannot change status from {current.value} to {trx_in.status.value}")
            with unit_of_work(db):
                trx.status = trx_in.status
                self.repository.update(db, trx)
            logger.info(f"Order {trx.kode_invoice} moved from {current.value} to {trx_in.status.value}")
        return self.to_response(db, trx)

trx_service = TrxService(trx_repository, produk_repository, alamat_repository)
