"""baseline schema - accounts, contacts, leads, opportunities

Revision ID: 001_baseline
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa

revision = '001_baseline'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # Accounts table
    op.create_table('accounts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('owner_id', sa.String(100), nullable=False, server_default='system'),
        sa.Column('status', sa.String(50), nullable=False, server_default='New'),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_accounts_name', 'accounts', ['name'])

    # Contacts table
    op.create_table('contacts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('title', sa.String(100), nullable=True),
        sa.Column('owner_id', sa.String(100), nullable=False, server_default='system'),
        sa.Column('revenue', sa.Float(), nullable=True),
        sa.Column('closed_won_revenue', sa.Float(), nullable=True),
        sa.Column('closed_lost_revenue', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_contacts_account_id', 'contacts', ['account_id'])
    op.create_index('ix_contacts_email', 'contacts', ['email'])

    # Leads table; opportunity_id is a plain column to avoid a FK cycle
    op.create_table('leads',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('company_name', sa.String(255), nullable=False),
        sa.Column('contact_name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('status', sa.String(50), nullable=False, server_default='New'),
        sa.Column('owner_id', sa.String(100), nullable=False, server_default='system'),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('contact_id', sa.Integer(), nullable=False),
        sa.Column('opportunity_id', sa.Integer(), nullable=True),
        sa.Column('department', sa.String(255), nullable=True),
        sa.Column('lead_type', sa.String(50), nullable=True),
        sa.Column('sales_manager', sa.String(255), nullable=True),
        sa.Column('delivery_manager', sa.String(255), nullable=True),
        sa.Column('fte_count', sa.Float(), nullable=True),
        sa.Column('non_fte', sa.Float(), nullable=True),
        sa.Column('expected_hours', sa.Float(), nullable=True),
        sa.Column('contract_type', sa.String(50), nullable=True),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('proposal_link', sa.String(500), nullable=True),
        sa.Column('estimates_link', sa.String(500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('lost_reason', sa.Text(), nullable=True),
        sa.Column('last_conversation', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id']),
        sa.ForeignKeyConstraint(['contact_id'], ['contacts.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_leads_status', 'leads', ['status'])
    op.create_index('ix_leads_account_id', 'leads', ['account_id'])
    op.create_index('ix_leads_contact_id', 'leads', ['contact_id'])
    op.create_index('ix_leads_opportunity_id', 'leads', ['opportunity_id'])

    # Opportunities table
    op.create_table('opportunities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=True),
        sa.Column('contact_id', sa.Integer(), nullable=True),
        sa.Column('original_lead_id', sa.Integer(), nullable=True),
        sa.Column('owner_id', sa.String(100), nullable=True),
        sa.Column('opp_name', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('service', sa.String(255), nullable=True),
        sa.Column('primary_team', sa.String(255), nullable=True),
        sa.Column('delivery_owner', sa.String(255), nullable=True),
        sa.Column('fte_count', sa.Float(), nullable=True),
        sa.Column('non_fte_hours', sa.Float(), nullable=True),
        sa.Column('non_fte', sa.Float(), nullable=True),
        sa.Column('pm_am', sa.String(255), nullable=True),
        sa.Column('stage', sa.String(50), nullable=False, server_default='New'),
        sa.Column('skill_tech', sa.String(255), nullable=True),
        sa.Column('value', sa.Float(), nullable=True),
        sa.Column('close_date', sa.String(40), nullable=True),
        sa.Column('comments', sa.Text(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('products', sa.Text(), nullable=True),
        sa.Column('git_link', sa.String(500), nullable=True),
        sa.Column('project_plan_link', sa.String(500), nullable=True),
        sa.Column('pm_tool_link', sa.String(500), nullable=True),
        sa.Column('project_folder_link', sa.String(500), nullable=True),
        sa.Column('downtrend_reason', sa.Text(), nullable=True),
        sa.Column('code_review_date', sa.String(40), nullable=True),
        sa.Column('code_review_owner', sa.String(255), nullable=True),
        sa.Column('last_modified_by', sa.String(255), nullable=True),
        sa.Column('last_modified_date', sa.String(40), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['account_id'], ['accounts.id']),
        sa.ForeignKeyConstraint(['contact_id'], ['contacts.id']),
        sa.ForeignKeyConstraint(['original_lead_id'], ['leads.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_opportunities_account_id', 'opportunities', ['account_id'])
    op.create_index('ix_opportunities_original_lead_id', 'opportunities', ['original_lead_id'])
    op.create_index('ix_opportunities_stage', 'opportunities', ['stage'])


def downgrade():
    op.drop_table('opportunities')
    op.drop_table('leads')
    op.drop_table('contacts')
    op.drop_table('accounts')
