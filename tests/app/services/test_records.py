"""Tests for app.services.records — project, validation and lead workflows."""
import logging

import pytest
from unittest.mock import patch

from app.services import records
from app.services.db import StoreError
from app.services.forms import FormValidationError
from app.models.idea_validation import IdeaValidation
from app.models.lead import Lead


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------

class TestProjects:

    def test_create_sets_owner(self, ctx, make_project):
        project = make_project()
        assert project['user_id'] == ctx.user_id
        assert project['stage'] == 'startup'

    def test_list_only_own_projects_newest_first(self, ctx, other_ctx, make_project):
        first = make_project(name='First')
        second = make_project(name='Second')
        make_project(owner=other_ctx, name='Not mine')
        names = [p['name'] for p in records.list_projects(ctx)]
        assert names == ['Second', 'First']
        assert first['id'] < second['id']

    def test_get_foreign_project_returns_none(self, other_ctx, make_project):
        project = make_project()
        assert records.get_project(other_ctx, project['id']) is None

    def test_delete_cascades_to_validations_and_leads(self, ctx, make_project, lead_payload, db_session):
        project = make_project()
        keep = make_project(name='Keep')
        records.create_validation(ctx, {'project_id': project['id'], 'strengths': ['x']})
        records.create_lead(ctx, lead_payload(project['id']))
        records.create_lead(ctx, lead_payload(keep['id']))

        assert records.delete_project(ctx, project['id']) is True

        assert records.get_project(ctx, project['id']) is None
        assert db_session.query(IdeaValidation).count() == 0
        assert [lead.project_id for lead in db_session.query(Lead).all()] == [keep['id']]

    def test_failed_lead_delete_keeps_whole_project(self, ctx, make_project, lead_payload):
        from app.services import db
        project = make_project()
        records.create_validation(ctx, {'project_id': project['id'], 'strengths': ['x']})
        records.create_lead(ctx, lead_payload(project['id']))
        real_column = db._column

        def column_or_fail(model, name):
            if model is Lead:
                raise RuntimeError("disk I/O error")
            return real_column(model, name)

        with patch('app.services.db._column', side_effect=column_or_fail):
            with pytest.raises(StoreError):
                records.delete_project(ctx, project['id'])

        assert records.get_project(ctx, project['id']) is not None
        assert len(records.list_validations(ctx, project_id=project['id'])) == 1
        assert len(records.list_leads(ctx, project_id=project['id'])) == 1

    def test_delete_foreign_project_is_refused(self, other_ctx, make_project):
        project = make_project()
        assert records.delete_project(other_ctx, project['id']) is False


# ---------------------------------------------------------------------------
# SWOT validations
# ---------------------------------------------------------------------------

class TestCreateValidation:

    def test_scores_filtered_lists(self, ctx, make_project):
        project = make_project()
        validation = records.create_validation(ctx, {
            'project_id': project['id'],
            'strengths': ['Strong brand', '  ', 'Great team'],
            'weaknesses': ['Cash'],
            'opportunities': ['Export'],
            'threats': [''],
            'recommendations': ['Raise a seed round', ''],
        })
        # 50 + 2*10 + 1*8 - 1*5
        assert validation['success_score'] == 73
        assert validation['score_band'] == 'medium'
        assert validation['strengths'] == ['Strong brand', 'Great team']
        assert validation['threats'] == []
        assert validation['recommendations'] == ['Raise a seed round']
        assert validation['project_name'] == 'Harbor Coffee'

    def test_empty_validation_scores_50(self, ctx, make_project):
        project = make_project()
        validation = records.create_validation(ctx, {'project_id': project['id']})
        assert validation['success_score'] == 50

    def test_client_supplied_score_ignored(self, ctx, make_project, db_session):
        project = make_project()
        validation = records.create_validation(ctx, {
            'project_id': project['id'], 'strengths': ['a'], 'success_score': 3,
        })
        assert validation['success_score'] == 60
        assert db_session.get(IdeaValidation, validation['id']).success_score == 60

    def test_unknown_project_returns_none(self, ctx):
        assert records.create_validation(ctx, {'project_id': 999}) is None

    def test_foreign_project_returns_none(self, other_ctx, make_project):
        project = make_project()
        assert records.create_validation(other_ctx, {'project_id': project['id']}) is None

    def test_missing_project_id_raises(self, ctx):
        with pytest.raises(FormValidationError):
            records.create_validation(ctx, {'strengths': ['x']})

    def test_logs_score(self, ctx, make_project, caplog):
        project = make_project()
        with caplog.at_level(logging.INFO, logger='services.records'):
            records.create_validation(ctx, {'project_id': project['id'], 'threats': ['t']})
        assert 'success_score=43' in caplog.text

    def test_store_failure_propagates(self, ctx, make_project):
        project = make_project()
        with patch('app.services.records.db.create', side_effect=StoreError('boom')):
            with pytest.raises(StoreError):
                records.create_validation(ctx, {'project_id': project['id']})


class TestListAndDeleteValidations:

    def test_enriched_with_project_name(self, ctx, make_project):
        a = make_project(name='Alpha')
        b = make_project(name='Beta')
        records.create_validation(ctx, {'project_id': a['id']})
        records.create_validation(ctx, {'project_id': b['id']})
        names = [v['project_name'] for v in records.list_validations(ctx)]
        assert names == ['Beta', 'Alpha']

    def test_filter_by_project(self, ctx, make_project):
        a = make_project(name='Alpha')
        b = make_project(name='Beta')
        records.create_validation(ctx, {'project_id': a['id']})
        records.create_validation(ctx, {'project_id': b['id']})
        listed = records.list_validations(ctx, project_id=a['id'])
        assert [v['project_id'] for v in listed] == [a['id']]

    def test_empty(self, ctx):
        assert records.list_validations(ctx) == []

    def test_other_users_validations_hidden(self, ctx, other_ctx, make_project):
        project = make_project()
        records.create_validation(ctx, {'project_id': project['id']})
        assert records.list_validations(other_ctx) == []

    def test_delete(self, ctx, other_ctx, make_project):
        project = make_project()
        validation = records.create_validation(ctx, {'project_id': project['id']})
        assert records.delete_validation(other_ctx, validation['id']) is False
        assert records.delete_validation(ctx, validation['id']) is True
        assert records.delete_validation(ctx, validation['id']) is False


# ---------------------------------------------------------------------------
# Leads
# ---------------------------------------------------------------------------

class TestCreateLead:

    def test_full_contact_scores_100(self, ctx, make_project, lead_payload):
        project = make_project()
        lead = records.create_lead(ctx, lead_payload(project['id']))
        assert lead['lead_score'] == 100
        assert lead['score_band'] == 'high'
        assert lead['status'] == 'new'
        assert lead['tags'] == ['office', 'subscription']

    def test_email_only_scores_65(self, ctx, make_project):
        project = make_project()
        lead = records.create_lead(ctx, {'project_id': project['id'], 'name': 'E', 'email': 'e@x.io'})
        assert lead['lead_score'] == 65

    def test_whitespace_fields_stored_as_null_and_not_scored(self, ctx, make_project, lead_payload):
        project = make_project()
        lead = records.create_lead(ctx, lead_payload(
            project['id'], email='   ', phone='', linkedin_url=' ', company=None, role='  ',
        ))
        assert lead['lead_score'] == 50
        assert lead['email'] is None
        assert lead['phone'] is None

    def test_client_score_and_status_ignored(self, ctx, make_project):
        project = make_project()
        lead = records.create_lead(ctx, {
            'project_id': project['id'], 'name': 'N', 'lead_score': 7, 'status': 'converted',
        })
        assert lead['lead_score'] == 50
        assert lead['status'] == 'new'

    def test_unknown_project_returns_none(self, ctx, lead_payload):
        assert records.create_lead(ctx, lead_payload(4242)) is None

    def test_name_required(self, ctx, make_project):
        project = make_project()
        with pytest.raises(FormValidationError):
            records.create_lead(ctx, {'project_id': project['id'], 'email': 'a@b.c'})


class TestListLeads:

    @pytest.fixture
    def seeded(self, ctx, make_project, lead_payload):
        project = make_project()
        low = records.create_lead(ctx, {'project_id': project['id'], 'name': 'Low'})
        high = records.create_lead(ctx, lead_payload(project['id'], name='High'))
        mid = records.create_lead(ctx, {'project_id': project['id'], 'name': 'Mid', 'email': 'm@x.io'})
        return project, low, mid, high

    def test_ordered_by_score_desc(self, ctx, seeded):
        assert [lead['name'] for lead in records.list_leads(ctx)] == ['High', 'Mid', 'Low']

    def test_status_filter(self, ctx, seeded):
        _, low, _, _ = seeded
        records.update_lead_status(ctx, low['id'], 'qualified')
        assert [lead['name'] for lead in records.list_leads(ctx, status='qualified')] == ['Low']
        assert len(records.list_leads(ctx, status='all')) == 3

    def test_invalid_status_filter_raises(self, ctx, seeded):
        with pytest.raises(FormValidationError):
            records.list_leads(ctx, status='archived')

    def test_project_filter(self, ctx, seeded, make_project):
        other = make_project(name='Other')
        records.create_lead(ctx, {'project_id': other['id'], 'name': 'Elsewhere'})
        assert [lead['name'] for lead in records.list_leads(ctx, project_id=other['id'])] == ['Elsewhere']


class TestUpdateLeadStatus:

    def test_any_status_to_any_status(self, ctx, make_project):
        project = make_project()
        lead = records.create_lead(ctx, {'project_id': project['id'], 'name': 'L'})
        for status in ['lost', 'new', 'converted', 'contacted', 'qualified', 'new']:
            updated = records.update_lead_status(ctx, lead['id'], status)
            assert updated['status'] == status

    def test_score_unchanged_by_status(self, ctx, make_project):
        project = make_project()
        lead = records.create_lead(ctx, {'project_id': project['id'], 'name': 'L', 'phone': '1'})
        updated = records.update_lead_status(ctx, lead['id'], 'converted')
        assert updated['lead_score'] == lead['lead_score'] == 60

    def test_invalid_status_raises(self, ctx, make_project):
        project = make_project()
        lead = records.create_lead(ctx, {'project_id': project['id'], 'name': 'L'})
        with pytest.raises(FormValidationError):
            records.update_lead_status(ctx, lead['id'], 'won')

    def test_foreign_lead_returns_none(self, ctx, other_ctx, make_project):
        project = make_project()
        lead = records.create_lead(ctx, {'project_id': project['id'], 'name': 'L'})
        assert records.update_lead_status(other_ctx, lead['id'], 'lost') is None


class TestCountsAndStats:

    def test_lead_status_counts(self, ctx, make_project):
        project = make_project()
        a = records.create_lead(ctx, {'project_id': project['id'], 'name': 'A'})
        records.create_lead(ctx, {'project_id': project['id'], 'name': 'B'})
        records.update_lead_status(ctx, a['id'], 'converted')
        counts = records.lead_status_counts(ctx)
        assert counts == {'new': 1, 'contacted': 0, 'qualified': 0, 'converted': 1, 'lost': 0, 'all': 2}

    def test_overview_stats_empty(self, ctx):
        stats = records.overview_stats(ctx)
        assert stats['projects'] == 0
        assert stats['validations']['avg_success_score'] == 0
        assert stats['leads']['bands'] == {'high': 0, 'medium': 0, 'low': 0}

    def test_overview_stats(self, ctx, make_project, lead_payload):
        project = make_project()
        records.create_validation(ctx, {'project_id': project['id'], 'strengths': ['a', 'b', 'c']})
        records.create_validation(ctx, {'project_id': project['id'], 'weaknesses': ['a', 'b']})
        records.create_lead(ctx, lead_payload(project['id']))
        records.create_lead(ctx, {'project_id': project['id'], 'name': 'Bare'})

        stats = records.overview_stats(ctx)
        assert stats['projects'] == 1
        assert stats['validations']['total'] == 2
        assert stats['validations']['avg_success_score'] == 60.0   # (80 + 40) / 2
        assert stats['validations']['bands'] == {'high': 1, 'medium': 0, 'low': 1}
        assert stats['leads']['avg_lead_score'] == 75.0            # (100 + 50) / 2
        assert stats['leads']['bands'] == {'high': 1, 'medium': 1, 'low': 0}
        assert stats['leads']['status']['new'] == 2
