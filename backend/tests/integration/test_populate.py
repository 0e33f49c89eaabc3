"""Integration Test: reference expansion of authors and subjects."""

import logging

from beanie import PydanticObjectId

from factories import make_document, make_subject, make_user
from models import StudyDocument
from services import populate_document, populate_documents


def test_populate_preserves_order_and_shares_referents(run_db):
    async def scenario():
        ada = await make_user()
        bob = await make_user(name="Bob", email="bob@example.com")
        math = await make_subject(name="Math")
        docs = [
            await make_document(bob, math, title="1"),
            await make_document(ada, None, title="2"),
            await make_document(bob, math, title="3"),
        ]

        populated = await populate_documents(docs)

        assert [d.title for d in populated] == ["1", "2", "3"]
        assert [d.author.name for d in populated] == ["Bob", "Ada", "Bob"]
        assert populated[0].subject.name == "Math"
        assert populated[1].subject is None

    run_db(scenario)


def test_populate_dangling_references_become_none(run_db):
    async def scenario():
        document = await StudyDocument(
            title="orphan",
            author=PydanticObjectId(),
            subject=PydanticObjectId(),
        ).insert()

        populated = await populate_document(document)

        assert populated.title == "orphan"
        assert populated.author is None
        assert populated.subject is None

    run_db(scenario)


def test_populate_hides_moderation_fields(run_db):
    async def scenario():
        author = await make_user(is_blocked=True, roles=["user", "admin"])
        subject = await make_subject(is_deleted=True, description="old syllabus")
        document = await make_document(author, subject)

        populated = await populate_document(document)
        author_view = populated.author.model_dump()
        subject_view = populated.subject.model_dump()

        assert set(author_view) == {"id", "name", "email", "avatar"}
        assert set(subject_view) == {"id", "name", "description"}
        assert subject_view["description"] == "old syllabus"

    run_db(scenario)


def test_populate_empty_and_none(run_db):
    async def scenario():
        assert await populate_documents([]) == []
        assert await populate_document(None) is None

    run_db(scenario)


def test_populate_logs_unresolved_authors_and_subjects(run_db, caplog):
    async def scenario():
        author = await make_user()
        missing_author = PydanticObjectId()
        missing_subject = PydanticObjectId()
        documents = [
            await StudyDocument(title="a", author=missing_author).insert(),
            await StudyDocument(
                title="b", author=author.id, subject=missing_subject
            ).insert(),
        ]

        with caplog.at_level(logging.WARNING, logger="services.populate"):
            await populate_documents(documents)

        messages = [r.getMessage() for r in caplog.records]
        assert any(
            "1 author reference(s)" in m and str(missing_author) in m for m in messages
        )
        assert any(
            "1 subject reference(s)" in m and str(missing_subject) in m for m in messages
        )

    run_db(scenario)
