"""Default template catalog covering company-wide, department and role variants."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from offboarding.application.use_cases.templates import (
    NewDocumentTemplateData as Doc,
    NewTaskTemplateData as Task,
    NewTemplateData,
    create_template,
)
from offboarding.domain.entities import OffboardingTemplate
from offboarding.infrastructure.repositories import TemplateRepository

logger = logging.getLogger(__name__)

SEED_AUTHOR = "system-seed"

DEFAULT_TEMPLATES: tuple[NewTemplateData, ...] = (
    NewTemplateData(
        name="Standard Company-Wide Offboarding",
        description="Default offboarding process applicable to all employees",
        scope="company_wide",
        estimated_duration_days=10,
        complexity_score=2,
        is_default=True,
        tasks=(
            Task(
                name="Schedule Exit Interview",
                description="Coordinate exit interview with HR",
                instructions="Contact HR to schedule a 60-minute exit interview session.",
                category="exit_interview",
                estimated_hours=1.0,
                sort_order=1,
                default_assignee_role="hr_representative",
                documents=(Doc(name="Exit Interview Form", document_type="form"),),
            ),
            Task(
                name="Complete Equipment Return",
                description="Return all company equipment",
                instructions="Return laptop, phone, badge, keys and other company property. Obtain a signed receipt.",
                category="equipment_return",
                estimated_hours=0.5,
                sort_order=2,
                default_assignee_role="departing_employee",
                requires_evidence=True,
                evidence_types=("signature", "document"),
                documents=(
                    Doc(name="Equipment Return Checklist", document_type="checklist"),
                ),
            ),
            Task(
                name="Knowledge Transfer Documentation",
                description="Document key responsibilities and handover information",
                instructions="Document daily tasks, ongoing projects and important contacts.",
                category="documentation",
                estimated_hours=4.0,
                sort_order=3,
                default_assignee_role="departing_employee",
                requires_approval=True,
                approval_role="direct_manager",
                documents=(
                    Doc(name="Handover Document Template", document_type="handover_document"),
                ),
            ),
            Task(
                name="Access Revocation Review",
                description="Review and revoke all system access",
                instructions="Revoke access to all systems, applications and physical spaces.",
                category="access_revocation",
                estimated_hours=1.5,
                sort_order=4,
                default_assignee_role="it_administrator",
                requires_evidence=True,
                evidence_types=("confirmation",),
                depends_on=("Complete Equipment Return",),
                documents=(
                    Doc(name="Access Revocation Checklist", document_type="checklist"),
                ),
            ),
            Task(
                name="Final Payroll and Benefits",
                description="Process final compensation and benefits transition",
                instructions="Calculate final pay, unused vacation time and the benefits transition.",
                category="final_procedures",
                estimated_hours=2.0,
                sort_order=5,
                default_assignee_role="hr_representative",
                requires_approval=True,
                approval_role="department_head",
            ),
        ),
    ),
    NewTemplateData(
        name="Engineering Department Offboarding",
        description="Specialized offboarding for engineering team members",
        scope="department_specific",
        department="Engineering",
        role_category="engineering",
        estimated_duration_days=14,
        complexity_score=4,
        is_default=True,
        requires_security_review=True,
        tasks=(
            Task(
                name="Code Repository Access Review",
                description="Review and secure code repository access",
                instructions="Remove access to code repositories and review commit history for sensitive information.",
                category="access_revocation",
                estimated_hours=1.0,
                sort_order=1,
                default_assignee_role="it_administrator",
                requires_evidence=True,
                evidence_types=("screenshot", "confirmation"),
                requires_approval=True,
                approval_role="security_officer",
            ),
            Task(
                name="Technical Documentation Handover",
                description="Document technical systems and architecture knowledge",
                instructions="Document system architecture, deployment processes and technical decisions.",
                category="knowledge_transfer",
                estimated_hours=8.0,
                sort_order=2,
                default_assignee_role="departing_employee",
                requires_approval=True,
                approval_role="direct_manager",
                documents=(
                    Doc(name="Technical Architecture Document", document_type="knowledge_base"),
                    Doc(name="Deployment Process Guide", document_type="procedure_guide"),
                ),
            ),
            Task(
                name="Active Project Transition",
                description="Transition ownership of active development projects",
                instructions="Review project status and blockers with the team and assign new owners.",
                category="transition_planning",
                estimated_hours=6.0,
                sort_order=3,
                default_assignee_role="departing_employee",
                depends_on=("Technical Documentation Handover",),
                documents=(
                    Doc(name="Project Handover Checklist", document_type="checklist"),
                ),
            ),
            Task(
                name="Production Environment Review",
                description="Review production access and on-call responsibilities",
                instructions="Remove production access, update on-call rotations and transfer monitoring.",
                category="access_revocation",
                estimated_hours=2.0,
                sort_order=4,
                default_assignee_role="it_administrator",
                depends_on=("Active Project Transition",),
            ),
            Task(
                name="Intellectual Property Review",
                description="Review and secure intellectual property",
                instructions="Ensure code, documentation and technical assets are transferred and secured.",
                category="compliance",
                estimated_hours=1.5,
                sort_order=5,
                default_assignee_role="security_officer",
                requires_approval=True,
                approval_role="department_head",
            ),
        ),
    ),
    NewTemplateData(
        name="Sales Team Offboarding",
        description="Specialized offboarding for sales team members",
        scope="department_specific",
        department="Sales",
        role_category="sales",
        estimated_duration_days=12,
        complexity_score=3,
        is_default=True,
        tasks=(
            Task(
                name="Client Relationship Handover",
                description="Transfer client relationships to team members",
                instructions="Write client profiles and introduce replacement contacts to key clients.",
                category="knowledge_transfer",
                estimated_hours=6.0,
                sort_order=1,
                default_assignee_role="departing_employee",
                requires_approval=True,
                approval_role="direct_manager",
                documents=(
                    Doc(
                        name="Client Relationship Transfer Document",
                        document_type="handover_document",
                    ),
                    Doc(name="Client Contact List", document_type="contact_list"),
                ),
            ),
            Task(
                name="Pipeline and Opportunity Transfer",
                description="Transfer active sales opportunities",
                instructions="Update the CRM with opportunity status and transfer ownership.",
                category="transition_planning",
                estimated_hours=4.0,
                sort_order=2,
                default_assignee_role="departing_employee",
                documents=(
                    Doc(name="Pipeline Transfer Checklist", document_type="checklist"),
                ),
            ),
            Task(
                name="Commission and Quota Reconciliation",
                description="Finalize commission calculations and quota tracking",
                instructions="Calculate final commission payments and process pending deals.",
                category="final_procedures",
                estimated_hours=3.0,
                sort_order=3,
                default_assignee_role="hr_representative",
                requires_approval=True,
                approval_role="department_head",
                depends_on=("Pipeline and Opportunity Transfer",),
            ),
            Task(
                name="CRM Access and Data Review",
                description="Review CRM access and data ownership",
                instructions="Transfer data ownership in the CRM and remove access.",
                category="access_revocation",
                estimated_hours=1.5,
                sort_order=4,
                default_assignee_role="it_administrator",
                depends_on=("Pipeline and Opportunity Transfer",),
            ),
            Task(
                name="Client Communication Plan",
                description="Coordinate client communication about transition",
                instructions="Plan how clients learn about account manager changes.",
                category="communication",
                estimated_hours=2.0,
                sort_order=5,
                default_assignee_role="direct_manager",
                documents=(
                    Doc(
                        name="Client Communication Template",
                        document_type="other",
                        is_mandatory=False,
                    ),
                ),
            ),
        ),
    ),
    NewTemplateData(
        name="Senior Leadership Offboarding",
        description="Comprehensive offboarding for senior leadership roles",
        scope="role_specific",
        role_category="leadership",
        seniority_level="executive",
        estimated_duration_days=21,
        complexity_score=5,
        is_default=True,
        requires_security_review=True,
        tasks=(
            Task(
                name="Strategic Knowledge Transfer",
                description="Document strategic vision and long-term planning",
                instructions="Document strategic initiatives, long-term vision and key relationships.",
                category="knowledge_transfer",
                estimated_hours=12.0,
                sort_order=1,
                default_assignee_role="departing_employee",
                requires_approval=True,
                approval_role="department_head",
                documents=(
                    Doc(name="Strategic Vision Document", document_type="knowledge_base"),
                    Doc(name="Key Relationships Directory", document_type="contact_list"),
                ),
            ),
            Task(
                name="Board and Stakeholder Communication",
                description="Coordinate communication with board and key stakeholders",
                instructions="Plan communication with board members, investors and external stakeholders.",
                category="communication",
                estimated_hours=4.0,
                sort_order=2,
                default_assignee_role="custom",
                custom_assignee_role="CEO/Board Chair",
            ),
            Task(
                name="Team Leadership Transition",
                description="Transition leadership responsibilities to successors",
                instructions="Meet direct reports and formally transfer leadership responsibilities.",
                category="transition_planning",
                estimated_hours=8.0,
                sort_order=3,
                default_assignee_role="departing_employee",
                depends_on=("Strategic Knowledge Transfer",),
                documents=(
                    Doc(name="Leadership Transition Plan", document_type="procedure_guide"),
                ),
            ),
            Task(
                name="Confidentiality and Non-Compete Review",
                description="Review confidentiality agreements and legal obligations",
                instructions="Review legal agreements and post-employment obligations.",
                category="compliance",
                estimated_hours=2.0,
                sort_order=4,
                default_assignee_role="custom",
                custom_assignee_role="Legal Counsel",
                requires_approval=True,
                approval_role="security_officer",
            ),
            Task(
                name="Financial Authority Transfer",
                description="Transfer financial signing authority and access",
                instructions="Update bank signatures and transfer financial system access.",
                category="access_revocation",
                estimated_hours=3.0,
                sort_order=5,
                default_assignee_role="hr_representative",
                requires_approval=True,
                approval_role="department_head",
                documents=(
                    Doc(name="Financial Authority Transfer Form", document_type="form"),
                ),
            ),
        ),
    ),
    NewTemplateData(
        name="IT Administrator Offboarding",
        description="Specialized offboarding for IT and system administrators",
        scope="role_specific",
        department="IT",
        role_category="technical",
        estimated_duration_days=16,
        complexity_score=5,
        is_default=True,
        requires_security_review=True,
        tasks=(
            Task(
                name="Administrative Access Audit",
                description="Comprehensive audit of all administrative access",
                instructions="Inventory every system with administrative access and plan its transfer.",
                category="access_revocation",
                estimated_hours=4.0,
                sort_order=1,
                default_assignee_role="departing_employee",
                requires_approval=True,
                approval_role="security_officer",
                documents=(
                    Doc(name="Administrative Access Inventory", document_type="checklist"),
                ),
            ),
            Task(
                name="Critical System Documentation",
                description="Document critical system configurations and procedures",
                instructions="Document system configurations, emergency procedures and maintenance schedules.",
                category="documentation",
                estimated_hours=10.0,
                sort_order=2,
                default_assignee_role="departing_employee",
                requires_approval=True,
                approval_role="direct_manager",
                documents=(
                    Doc(name="System Configuration Guide", document_type="knowledge_base"),
                    Doc(name="Emergency Response Procedures", document_type="procedure_guide"),
                ),
            ),
            Task(
                name="Security Credential Transfer",
                description="Secure transfer of security credentials and certificates",
                instructions="Transfer certificates, API keys and other credentials through secure channels.",
                category="access_revocation",
                estimated_hours=3.0,
                sort_order=3,
                default_assignee_role="security_officer",
                requires_evidence=True,
                evidence_types=("confirmation", "signature"),
                depends_on=("Administrative Access Audit",),
            ),
            Task(
                name="Backup and Recovery Verification",
                description="Verify backup systems and recovery procedures",
                instructions="Test backups and recovery procedures for critical operations.",
                category="compliance",
                estimated_hours=4.0,
                sort_order=4,
                default_assignee_role="it_administrator",
                custom_assignee_role="Backup IT Administrator",
                depends_on=("Critical System Documentation",),
            ),
            Task(
                name="Vendor and Support Contact Transfer",
                description="Transfer vendor relationships and support contacts",
                instructions="Update vendor contacts and document service agreements.",
                category="transition_planning",
                estimated_hours=2.0,
                sort_order=5,
                default_assignee_role="departing_employee",
                documents=(
                    Doc(name="Vendor Contact Directory", document_type="contact_list"),
                ),
            ),
        ),
    ),
)


def seed_templates(session: Session) -> list[OffboardingTemplate]:
    """Create the default catalog, skipping templates that already exist."""

    repository = TemplateRepository(session)
    seeded: list[OffboardingTemplate] = []
    for data in DEFAULT_TEMPLATES:
        existing = repository.get_by_name(data.name)
        if existing is not None:
            logger.info("Template '%s' already present, skipping", data.name)
            seeded.append(existing)
            continue
        seeded.append(create_template(session, data, created_by=SEED_AUTHOR))
    return seeded


__all__ = ["DEFAULT_TEMPLATES", "SEED_AUTHOR", "seed_templates"]
