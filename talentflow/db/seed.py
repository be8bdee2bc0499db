"""
Seed demo data: 25 jobs, 1,000 candidates, applications for every job and
three assessments.

Runs at startup when SEED_ON_STARTUP is set and the job collection is empty,
or on demand through scripts/seed_demo_data.py.
"""

import logging
import random
from datetime import timedelta
from typing import Any, List, Optional

from talentflow.repositories.collections import Collection
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.common import JOB_STATUSES, STAGES
from talentflow.services.stage_history import INITIAL_NOTE, history_entry
from talentflow.utils.slug import job_slug
from talentflow.utils.time import utc_now

logger = logging.getLogger(__name__)

Record = dict[str, Any]

JOB_COUNT = 25
CANDIDATE_COUNT = 1000

DEPARTMENTS = ["Engineering", "Product", "Design", "Marketing", "Sales", "Operations", "HR", "Finance"]

JOB_TITLES = [
    "Senior Frontend Developer", "Backend Engineer", "Full Stack Developer", "DevOps Engineer",
    "Data Scientist", "Product Manager", "Senior Product Manager", "Product Owner", "Product Designer",
    "UX Designer", "UI Designer", "UX Researcher", "Marketing Manager", "Digital Marketing Specialist",
    "Content Manager", "Sales Manager", "Account Executive", "Customer Success Manager",
    "Operations Manager", "HR Manager", "Financial Analyst", "QA Engineer", "Mobile Developer",
    "Security Engineer", "Machine Learning Engineer",
]

CANDIDATE_NAMES = [
    "Sarah Chen", "Marcus Rodriguez", "Elena Kowalski", "James Thompson", "Priya Patel", "David Kim",
    "Maya Johnson", "Alex Turner", "Sofia Garcia", "Michael Brown", "Zoe Wang", "Ryan O'Connor",
    "Aisha Kumar", "Nathan Lee", "Isabella Santos", "Connor Murphy", "Aria Nguyen", "Lucas Silva",
    "Chloe Anderson", "Ethan Davis",
]

LOCATIONS = [
    "San Francisco, CA", "New York, NY", "Seattle, WA", "Austin, TX", "Boston, MA", "Los Angeles, CA",
    "Chicago, IL", "Denver, CO", "Portland, OR", "Atlanta, GA", "Miami, FL", "Dallas, TX",
]

TECH_TAGS = [
    "React", "Node.js", "Python", "TypeScript", "AWS", "Docker", "Kubernetes", "GraphQL",
    "Machine Learning", "Data Science", "Frontend", "Backend", "Full Stack", "DevOps",
    "UI/UX", "Product Management", "Marketing", "Sales", "Remote", "Senior", "Junior",
]

# (job index, title, description, questions)
ASSESSMENTS = [
    (0, "Frontend Technical Assessment",
     "Technical assessment for frontend developers focusing on React, JavaScript and modern web practices.",
     [
         {"id": 1, "type": "multiple-choice", "question": "What is the purpose of React.memo()?",
          "options": ["To memoize component props", "To prevent unnecessary re-renders",
                      "To cache API responses", "To optimize bundle size"],
          "correct_answer": 1, "required": True},
         {"id": 2, "type": "single-choice", "question": "What is the virtual DOM?",
          "options": ["A copy of the real DOM", "A JavaScript representation of the DOM",
                      "A browser API", "A React component"],
          "correct_answer": 1, "required": True},
         {"id": 3, "type": "text", "question": 'Explain the concept of "lifting state up" in React.',
          "required": True, "min_length": 50},
         {"id": 4, "type": "numeric", "question": "How many years of React experience do you have?",
          "required": True, "min_value": 0, "max_value": 20},
         {"id": 5, "type": "file-upload", "question": "Please upload a code sample demonstrating your React skills.",
          "required": False, "accepted_formats": [".js", ".jsx", ".ts", ".tsx", ".zip"]},
         {"id": 6, "type": "conditional", "question": "Do you have TypeScript experience?",
          "options": ["Yes", "No"], "required": False,
          "follow_up": {"type": "text", "question": "Describe a complex TypeScript feature you've used.",
                        "required": True}},
     ]),
    (5, "Product Management Assessment",
     "Evaluates product management skills, strategic thinking and analytical capabilities.",
     [
         {"id": 1, "type": "text", "question": "Describe how you would prioritize features for a new product launch.",
          "required": True, "min_length": 100, "max_length": 1000},
         {"id": 2, "type": "multiple-choice", "question": "Which framework is most commonly used for prioritization?",
          "options": ["RICE", "MoSCoW", "Kano Model", "All of the above"], "correct_answer": 3, "required": True},
         {"id": 3, "type": "numeric", "question": "How many years of product management experience do you have?",
          "required": True, "min_value": 0, "max_value": 30},
         {"id": 4, "type": "text", "question": "How do you handle conflicting stakeholder requirements?",
          "required": True, "min_length": 150},
         {"id": 5, "type": "single-choice", "question": "What is your preferred method for user research?",
          "options": ["User interviews", "Surveys", "A/B testing", "Analytics review"], "required": True},
     ]),
    (9, "UX Design Portfolio Assessment",
     "Evaluates UX design skills, design thinking process and portfolio quality.",
     [
         {"id": 1, "type": "file-upload", "question": "Please upload your design portfolio.",
          "required": True, "accepted_formats": [".pdf", ".zip", ".url"]},
         {"id": 2, "type": "text", "question": "Walk us through your design process for a recent project.",
          "required": True, "min_length": 200, "max_length": 1000},
         {"id": 3, "type": "multiple-choice", "question": "Which design tools do you use regularly?",
          "options": ["Figma", "Sketch", "Adobe XD", "Framer", "InVision"], "multiple": True, "required": True},
         {"id": 4, "type": "numeric", "question": "How many years of UX design experience do you have?",
          "required": True, "min_value": 0, "max_value": 25},
         {"id": 5, "type": "multiple-choice", "question": "Which accessibility guidelines do you follow?",
          "options": ["WCAG 2.1", "Section 508", "ADA", "None in particular"], "correct_answer": 0,
          "required": True},
     ]),
]


def _days_ago(rng: random.Random, days: float):
    return utc_now() - timedelta(days=rng.random() * days)


def build_jobs(rng: random.Random) -> List[Record]:
    jobs = []
    for i in range(1, JOB_COUNT + 1):
        title = JOB_TITLES[(i - 1) % len(JOB_TITLES)]
        department = DEPARTMENTS[i % len(DEPARTMENTS)]
        status = JOB_STATUSES[i % len(JOB_STATUSES)]
        jobs.append({
            "title": title,
            "department": department,
            "status": status,
            "description": (
                f"We are seeking a talented {title} to join our {department} team. "
                "This role involves working on cutting-edge projects with cross-functional teams."
            ),
            "requirements": [
                f"3+ years of experience in {title.lower()}",
                "Strong communication skills",
                "Bachelor's degree or equivalent experience",
            ],
            "tags": TECH_TAGS[: rng.randint(2, 5)],
            "created_at": _days_ago(rng, 30),
            "updated_at": _days_ago(rng, 7),
        })
    return jobs


def build_candidates(rng: random.Random) -> List[Record]:
    candidates = []
    for i in range(1, CANDIDATE_COUNT + 1):
        if i <= len(CANDIDATE_NAMES):
            name = CANDIDATE_NAMES[i - 1]
            email_suffix = ""
        else:
            name = f"{CANDIDATE_NAMES[i % len(CANDIDATE_NAMES)]} {i // len(CANDIDATE_NAMES)}"
            email_suffix = str(i)
        position = JOB_TITLES[i % len(JOB_TITLES)]
        stage = STAGES[i % len(STAGES)]
        experience = f"{rng.randint(1, 10)} years"
        created_at = _days_ago(rng, 60)

        history = [history_entry("applied", INITIAL_NOTE, when=created_at)]
        if stage != "applied":
            moved_at = created_at + timedelta(days=rng.random() * 10)
            history.append(history_entry(stage, f"Stage updated to {stage}", when=moved_at))

        candidates.append({
            "name": name,
            "email": f"{'.'.join(name.lower().split())}{email_suffix}@email.com",
            "phone": f"+1-555-{rng.randint(0, 9999):04d}",
            "position": position,
            "stage": stage,
            "experience": experience,
            "location": LOCATIONS[i % len(LOCATIONS)],
            "resume_url": f"https://example.com/resume-{i}.pdf",
            "notes": f"{name} is a {experience} experienced {position} with a strong background.",
            "stage_history": history,
            "created_at": created_at,
            "updated_at": _days_ago(rng, 14),
        })
    return candidates


def build_applications(rng: random.Random, jobs: List[Record], candidates: List[Record]) -> List[Record]:
    """5-20 applications per job; the application follows the candidate's stage."""
    applications = []
    for job in jobs:
        for candidate in rng.sample(candidates, rng.randint(5, 20)):
            applied_at = _days_ago(rng, 45)
            history = [history_entry("applied", INITIAL_NOTE, when=applied_at)]
            if candidate["stage"] != "applied":
                history.append(history_entry(
                    candidate["stage"],
                    f"Moved to {candidate['stage']}",
                    when=applied_at + timedelta(days=rng.random() * 10),
                ))
            applications.append({
                "job_id": job["id"],
                "candidate_id": candidate["id"],
                "stage": candidate["stage"],
                "applied_at": applied_at,
                "notes": f"Application for {job['title']}",
                "stage_history": history,
                "created_at": applied_at,
            })
    return applications


def build_assessments(jobs: List[Record]) -> List[Record]:
    now = utc_now()
    return [
        {
            "job_id": jobs[index]["id"] if index < len(jobs) else None,
            "title": title,
            "description": description,
            "questions": questions,
            "created_at": now - timedelta(days=20 - 5 * offset),
            "updated_at": now - timedelta(days=5 - 2 * offset),
        }
        for offset, (index, title, description, questions) in enumerate(ASSESSMENTS)
    ]


async def seed_database(store: EntityStore, seed: Optional[int] = None, force: bool = False) -> bool:
    """
    Populate an empty store. Returns False when jobs already exist (unless forced).
    """
    if not force and await store.count(Collection.JOBS) > 0:
        logger.info("Store already contains data, skipping seed")
        return False

    rng = random.Random(seed)
    logger.info("Seeding store with demo data...")

    jobs = await store.bulk_create(
        Collection.JOBS,
        build_jobs(rng),
        finalize=lambda job_id, body: {**body, "slug": job_slug(body["title"], job_id)},
    )
    candidates = await store.bulk_create(Collection.CANDIDATES, build_candidates(rng))
    applications = await store.bulk_create(Collection.APPLICATIONS, build_applications(rng, jobs, candidates))
    assessments = await store.bulk_create(Collection.ASSESSMENTS, build_assessments(jobs))

    logger.info(
        "Seeded %d jobs, %d candidates, %d applications, %d assessments",
        len(jobs),
        len(candidates),
        len(applications),
        len(assessments),
    )
    return True
