"""initial_partner_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00.000000

파트너 회원, 사업자 프로필, 알림 설정, 활동 지역, 지역별 가격, 관리자 테이블 생성.
Create members, member_business_profiles, notification_settings,
member_activity_regions, member_product_prices and admins tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    # members: 파트너 계정 (PENDING → ACTIVE ↔ SUSPENDED, 모든 상태 → DELETED)
    op.create_table(
        'members',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('login_id', sa.String(50), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('nickname', sa.String(50), nullable=False),
        sa.Column('mobile', sa.String(20), nullable=False),
        sa.Column('status', sa.String(20), server_default='PENDING', nullable=False),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), server_default=sa.text('false'), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deleted_by', sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_members_login_id', 'members', ['login_id'], unique=True)
    op.create_index('ix_members_status', 'members', ['status'])

    # member_business_profiles: 사업자 정보 + 승인 상태 (1:1)
    op.create_table(
        'member_business_profiles',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('member_id', UUID(as_uuid=True), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('business_number', sa.String(12), nullable=False),
        sa.Column('corp_name', sa.String(100), nullable=False),
        sa.Column('ceo_name', sa.String(50), nullable=False),
        sa.Column('business_type', sa.String(100), nullable=True),
        sa.Column('business_item', sa.String(100), nullable=True),
        sa.Column('company_address', sa.String(255), nullable=True),
        sa.Column('fax', sa.String(20), nullable=True),
        sa.Column('memo', sa.String(2000), nullable=True),
        sa.Column('approval_status', sa.String(20), server_default='PENDING', nullable=False),
        sa.Column('approved_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('approved_by', sa.String(50), nullable=True),
        sa.Column('rejection_reason', sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        'ix_member_business_profiles_business_number', 'member_business_profiles', ['business_number'], unique=True
    )

    # notification_settings: 회원별 알림 수신 설정 (1:1)
    op.create_table(
        'notification_settings',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('member_id', UUID(as_uuid=True), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('sms_order_created', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('sms_order_canceled', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('sms_delivery_started', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('sms_delivery_completed', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('sms_payment_completed', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('call_order_created', sa.Boolean(), server_default=sa.text('false')),
        sa.Column('call_delivery_started', sa.Boolean(), server_default=sa.text('false')),
        sa.Column('call_emergency_only', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('email_order_created', sa.Boolean(), server_default=sa.text('false')),
        sa.Column('email_order_canceled', sa.Boolean(), server_default=sa.text('false')),
        sa.Column('email_weekly_report', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('email_monthly_report', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('push_order_created', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('push_delivery_started', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('push_system_notice', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('notification_start_time', sa.String(5), server_default='09:00'),
        sa.Column('notification_end_time', sa.String(5), server_default='21:00'),
        sa.Column('night_time_notification', sa.Boolean(), server_default=sa.text('false')),
        *_timestamps(),
    )

    # member_activity_regions: 배송 가능 지역, (회원, 시도, 시군구) 고유
    op.create_table(
        'member_activity_regions',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('member_id', UUID(as_uuid=True), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('sido', sa.String(50), nullable=False),
        sa.Column('sigungu', sa.String(50), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('display_order', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('member_id', 'sido', 'sigungu', name='uq_member_activity_region'),
    )
    op.create_index('ix_member_activity_regions_member_id', 'member_activity_regions', ['member_id'])

    # member_product_prices: 지역별 카테고리 가격 (천원 단위)
    op.create_table(
        'member_product_prices',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('member_id', UUID(as_uuid=True), sa.ForeignKey('members.id', ondelete='CASCADE'), nullable=False),
        sa.Column('sido', sa.String(50), nullable=False),
        sa.Column('sigungu', sa.String(50), nullable=False),
        sa.Column('category_name', sa.String(50), nullable=False),
        sa.Column('price', sa.Numeric(10, 0), nullable=False),
        sa.Column('is_available', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('display_order', sa.Integer(), server_default='0', nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('member_id', 'sido', 'sigungu', 'category_name', name='uq_member_region_category'),
    )
    op.create_index('ix_member_product_prices_region', 'member_product_prices', ['sido', 'sigungu', 'category_name'])

    # admins: 관리자 계정
    op.create_table(
        'admins',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('login_id', sa.String(50), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true')),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table('admins')
    op.drop_index('ix_member_product_prices_region', table_name='member_product_prices')
    op.drop_table('member_product_prices')
    op.drop_index('ix_member_activity_regions_member_id', table_name='member_activity_regions')
    op.drop_table('member_activity_regions')
    op.drop_table('notification_settings')
    op.drop_index('ix_member_business_profiles_business_number', table_name='member_business_profiles')
    op.drop_table('member_business_profiles')
    op.drop_index('ix_members_status', table_name='members')
    op.drop_index('ix_members_login_id', table_name='members')
    op.drop_table('members')
