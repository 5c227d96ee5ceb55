"""usuarios, puntos_reciclaje, comentarios 테이블

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "usuarios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nombre", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("creado_en", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_usuarios_id"), "usuarios", ["id"], unique=False)
    op.create_index(op.f("ix_usuarios_email"), "usuarios", ["email"], unique=True)

    op.create_table(
        "puntos_reciclaje",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("usuario_id", sa.Integer(), nullable=False),
        sa.Column("nombre", sa.String(length=150), nullable=False),
        sa.Column("tipo_residuo", sa.String(length=100), nullable=False),
        sa.Column("direccion", sa.Text(), nullable=True),
        sa.Column("lat", sa.Float(), nullable=True),
        sa.Column("lon", sa.Float(), nullable=True),
        sa.Column("creado_en", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["usuario_id"], ["usuarios.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_puntos_reciclaje_id"), "puntos_reciclaje", ["id"], unique=False)
    op.create_index(op.f("ix_puntos_reciclaje_usuario_id"), "puntos_reciclaje", ["usuario_id"], unique=False)

    # 지점 삭제 시 댓글도 함께 삭제 (ON DELETE CASCADE)
    op.create_table(
        "comentarios",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("usuario_id", sa.Integer(), nullable=False),
        sa.Column("punto_id", sa.Integer(), nullable=False),
        sa.Column("comentario", sa.Text(), nullable=True),
        sa.Column("calificacion", sa.Integer(), nullable=False),
        sa.Column("creado_en", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("calificacion BETWEEN 1 AND 5", name="ck_comentarios_calificacion_rango"),
        sa.ForeignKeyConstraint(["punto_id"], ["puntos_reciclaje.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["usuario_id"], ["usuarios.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_comentarios_id"), "comentarios", ["id"], unique=False)
    op.create_index(op.f("ix_comentarios_punto_id"), "comentarios", ["punto_id"], unique=False)
    op.create_index(op.f("ix_comentarios_usuario_id"), "comentarios", ["usuario_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_comentarios_usuario_id"), table_name="comentarios")
    op.drop_index(op.f("ix_comentarios_punto_id"), table_name="comentarios")
    op.drop_index(op.f("ix_comentarios_id"), table_name="comentarios")
    op.drop_table("comentarios")
    op.drop_index(op.f("ix_puntos_reciclaje_usuario_id"), table_name="puntos_reciclaje")
    op.drop_index(op.f("ix_puntos_reciclaje_id"), table_name="puntos_reciclaje")
    op.drop_table("puntos_reciclaje")
    op.drop_index(op.f("ix_usuarios_email"), table_name="usuarios")
    op.drop_index(op.f("ix_usuarios_id"), table_name="usuarios")
    op.drop_table("usuarios")
