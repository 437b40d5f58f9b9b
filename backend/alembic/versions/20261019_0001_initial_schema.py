"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00

"""
from alembic import op
import sqlalchemy as sa


revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), primary_key=True),
        sa.Column("nama", sa.String(255), nullable=False),
        sa.Column("kata_sandi", sa.String(255), nullable=False),
        sa.Column("no_telp", sa.String(255), nullable=False),
        sa.Column("tanggal_lahir", sa.Date()),
        sa.Column("jenis_kelamin", sa.String(255)),
        sa.Column("tentang", sa.Text()),
        sa.Column("pekerjaan", sa.String(255)),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("id_provinsi", sa.String(255)),
        sa.Column("id_kota", sa.String(255)),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index("ix_users_user_id", "users", ["user_id"])
    op.create_index("ix_users_no_telp", "users", ["no_telp"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "alamat",
        sa.Column("alamat_id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False),
        sa.Column("judul_alamat", sa.String(255)),
        sa.Column("nama_penerima", sa.String(255)),
        sa.Column("no_telp", sa.String(255)),
        sa.Column("detail_alamat", sa.String(255)),
        *_timestamps(),
    )
    op.create_index("ix_alamat_alamat_id", "alamat", ["alamat_id"])
    op.create_index("ix_alamat_user_id", "alamat", ["user_id"])

    op.create_table(
        "toko",
        sa.Column("toko_id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False),
        sa.Column("nama_toko", sa.String(255)),
        sa.Column("url_foto", sa.String(255)),
        *_timestamps(),
    )
    op.create_index("ix_toko_toko_id", "toko", ["toko_id"])
    op.create_index("ix_toko_user_id", "toko", ["user_id"])

    op.create_table(
        "category",
        sa.Column("category_id", sa.Integer(), primary_key=True),
        sa.Column("nama_category", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_category_category_id", "category", ["category_id"])

    op.create_table(
        "produk",
        sa.Column("produk_id", sa.Integer(), primary_key=True),
        sa.Column("nama_produk", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255)),
        sa.Column("harga_reseller", sa.String(255)),
        sa.Column("harga_konsumen", sa.String(255)),
        sa.Column("stok", sa.Integer(), nullable=False),
        sa.Column("deskripsi", sa.Text()),
        sa.Column("toko_id", sa.Integer(), sa.ForeignKey("toko.toko_id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("category.category_id"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_produk_produk_id", "produk", ["produk_id"])
    op.create_index("ix_produk_slug", "produk", ["slug"])
    op.create_index("ix_produk_toko_id", "produk", ["toko_id"])

    op.create_table(
        "foto_produk",
        sa.Column("foto_id", sa.Integer(), primary_key=True),
        sa.Column("produk_id", sa.Integer(), sa.ForeignKey("produk.produk_id", ondelete="CASCADE"), nullable=False),
        sa.Column("url", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_foto_produk_foto_id", "foto_produk", ["foto_id"])
    op.create_index("ix_foto_produk_produk_id", "foto_produk", ["produk_id"])

    op.create_table(
        "log_produk",
        sa.Column("log_produk_id", sa.Integer(), primary_key=True),
        sa.Column("produk_id", sa.Integer(), nullable=False),
        sa.Column("nama_produk", sa.String(255)),
        sa.Column("slug", sa.String(255)),
        sa.Column("harga_reseller", sa.String(255)),
        sa.Column("harga_konsumen", sa.String(255)),
        sa.Column("deskripsi", sa.Text()),
        sa.Column("toko_id", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_log_produk_log_produk_id", "log_produk", ["log_produk_id"])
    op.create_index("ix_log_produk_produk_id", "log_produk", ["produk_id"])

    op.create_table(
        "trx",
        sa.Column("trx_id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("alamat_pengiriman", sa.Integer(), sa.ForeignKey("alamat.alamat_id"), nullable=False),
        sa.Column("harga_total", sa.Float(), nullable=False),
        sa.Column("kode_invoice", sa.String(255), nullable=False, unique=True),
        sa.Column(
            "status",
            sa.Enum("pending", "completed", "cancelled", name="trxstatusenum"),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index("ix_trx_trx_id", "trx", ["trx_id"])
    op.create_index("ix_trx_user_id", "trx", ["user_id"])

    op.create_table(
        "detail_trx",
        sa.Column("detail_trx_id", sa.Integer(), primary_key=True),
        sa.Column("trx_id", sa.Integer(), sa.ForeignKey("trx.trx_id", ondelete="CASCADE"), nullable=False),
        sa.Column("log_produk_id", sa.Integer(), sa.ForeignKey("log_produk.log_produk_id"), nullable=False),
        sa.Column("toko_id", sa.Integer(), nullable=False),
        sa.Column("kuantitas", sa.Integer(), nullable=False),
        sa.Column("harga_total", sa.Float(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_detail_trx_detail_trx_id", "detail_trx", ["detail_trx_id"])
    op.create_index("ix_detail_trx_trx_id", "detail_trx", ["trx_id"])


def downgrade():
    op.drop_table("detail_trx")
    op.drop_table("trx")
    op.drop_table("log_produk")
    op.drop_table("foto_produk")
    op.drop_table("produk")
    op.drop_table("category")
    op.drop_table("toko")
    op.drop_table("alamat")
    op.drop_table("users")
    sa.Enum(name="trxstatusenum").drop(op.get_bind(), checkfirst=True)
