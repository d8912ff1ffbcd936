#!/usr/bin/env python3
"""
Seed database with test data for development.
"""

import asyncio
import logging
import os
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from jobdesk.application.services.auth_service import hash_password
from jobdesk.application.use_cases.create_job import CreateJobRequest, CreateJobUseCase
from jobdesk.application.use_cases.manage_answers import ManageAnswersUseCase
from jobdesk.application.use_cases.manage_questions import ManageQuestionsUseCase
from jobdesk.config.settings import settings
from jobdesk.domain.value_objects.question_type import QuestionType
from jobdesk.domain.value_objects.role import Role
from jobdesk.infrastructure.database.models import (
    CustomerModel,
    NotificationModel,
    UserModel,
    WorkerAssignmentModel,
    WorkerModel,
)
from jobdesk.infrastructure.database.repositories import (
    AnswerRepository,
    CustomerRepository,
    JobQuestionRepository,
    JobRepository,
    QuestionRepository,
    TransactionService,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SEED_PASSWORD = "changeme"


def get_seed_database_url() -> str:
    """Get database URL for seeding."""
    # Allow override for Docker environment
    return os.getenv("MIGRATION_DATABASE_URL") or str(settings.DATABASE_URL)


async def seed_users(session: AsyncSession) -> None:
    logger.info("Creating users...")
    session.add_all(
        [
            UserModel(
                username=role.value.lower(),
                password=hash_password(SEED_PASSWORD),
                role=role,
            )
            for role in Role
        ]
    )
    await session.flush()


async def seed_database() -> None:
    """Seed database with test data."""
    database_url = get_seed_database_url()
    logger.info("Connecting to database: %s", database_url.split("@")[-1])

    engine = create_async_engine(database_url)
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    try:
        async with session_factory() as session:
            # Check if data already exists
            existing = await session.execute(select(func.count()).select_from(UserModel))
            if existing.scalar_one() > 0:
                logger.info("Database already has data, skipping seed.")
                return

            transaction_service = TransactionService(session)
            await transaction_service.execute_in_transaction(lambda: seed_users(session))

            logger.info("Creating customer...")
            customer_repository = CustomerRepository(session)
            customer = await transaction_service.execute_in_transaction(
                lambda: customer_repository.create(
                    CustomerModel(
                        name="Harbor Logistics",
                        phone="555-0100",
                        email="ops@harbor.example",
                        address="12 Dock Street",
                        contact_name="Sam Rivera",
                    )
                )
            )

            logger.info("Creating questions...")
            question_repository = QuestionRepository(session)
            questions = ManageQuestionsUseCase(question_repository, transaction_service)
            site_notes = await questions.create(
                QuestionType.TEXT, "Describe site access and parking.", None
            )
            forklift = await questions.create(
                QuestionType.RADIO, "Is a forklift available on site?", ["Yes", "No"]
            )
            safety = await questions.create(
                QuestionType.CHECKBOX,
                "Which safety equipment is required?",
                ["Hard hat", "Steel-toe boots", "High-visibility vest", "Gloves"],
            )

            logger.info("Creating jobs...")
            job_repository = JobRepository(session)
            create_job = CreateJobUseCase(
                job_repo=job_repository,
                customer_repo=customer_repository,
                question_repo=question_repository,
                job_question_repo=JobQuestionRepository(session),
                transaction_service=transaction_service,
            )
            now = datetime.now(timezone.utc)
            warehouse = await create_job.execute(
                CreateJobRequest(
                    name="Warehouse inventory count",
                    description="Quarterly stock count across both bays.",
                    deadline=now + timedelta(days=7),
                    customer_id=customer.id,
                )
            )
            await create_job.execute(
                CreateJobRequest(
                    name="Container unloading",
                    description="Unload two 40ft containers.",
                    deadline=now + timedelta(days=2),
                    customer_id=customer.id,
                )
            )

            logger.info("Creating answers...")
            answers = ManageAnswersUseCase(
                AnswerRepository(session), question_repository, transaction_service
            )
            job_id = warehouse.job.id
            await answers.create(job_id, site_notes.id, "Gate code 4411, park by bay 2.")
            await answers.create(job_id, forklift.id, "Yes")
            await answers.create(job_id, safety.id, ["Hard hat", "Steel-toe boots"])

            logger.info("Creating worker assignments...")

            async def seed_staffing():
                assignment = WorkerAssignmentModel(
                    job_id=job_id, position="Inventory clerk", number_of_workers=2
                )
                session.add(assignment)
                await session.flush()
                session.add_all(
                    [
                        WorkerModel(
                            worker_assignment_id=assignment.id,
                            name="Alex Chen",
                            email="alex@example.com",
                            background_check_date=date.today(),
                        ),
                        WorkerModel(
                            worker_assignment_id=assignment.id,
                            name="Jordan Lee",
                            phone="555-0133",
                        ),
                        NotificationModel(
                            text="Warehouse inventory count needs one more clerk.",
                            link=f"/jobs/{warehouse.job.uuid}",
                        ),
                    ]
                )
                await session.flush()

            await transaction_service.execute_in_transaction(seed_staffing)

            logger.info("Database seeded successfully!")
            logger.info(
                "Users created: %s (password: %s)",
                ", ".join(role.value.lower() for role in Role),
                SEED_PASSWORD,
            )

    except Exception as e:
        logger.error("Error seeding database: %s", e)
        raise
    finally:
        await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed_database())
