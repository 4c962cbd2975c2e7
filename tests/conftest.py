"""Shared fixtures: a small three-domain taxonomy built in memory."""

import pytest

from pathfinder.contexts.taxonomy import TaxonomyStore


def _salary(low, high, period="yearly"):
    return {"min": low, "max": high, "currency": "USD", "period": period}


@pytest.fixture
def domain_records():
    """
    Plain catalog records (snake_case keys), rebuilt for every test.

    - tech: two subfields, one entry-level career, one internship, an entry
      experience level, high demand, 22% growth
    - health: one subfield, no careers, medium demand, related to a domain
      that does not exist
    - arts: one subfield, low demand
    """
    return [
        {
            "id": "tech",
            "name": "Technology",
            "description": "Build software and digital systems.",
            "icon": "laptop",
            "color": "#3B82F6",
            "subfields": [
                {
                    "id": "software",
                    "name": "Software Development",
                    "description": "Create applications and websites.",
                    "required_skills": ["Programming", "Testing"],
                    "average_salary": _salary(60000, 150000),
                    "job_roles": ["Software Developer", "Web Developer"],
                    "keywords": ["coding", "software engineering"],
                },
                {
                    "id": "data",
                    "name": "Data & Analytics",
                    "description": "Turn raw numbers into insight.",
                    "required_skills": ["Statistics", "SQL"],
                    "average_salary": _salary(70000, 160000),
                    "job_roles": ["Data Analyst"],
                    "keywords": ["analytics"],
                },
            ],
            "career_examples": [
                {
                    "id": "junior-dev",
                    "title": "Junior Software Developer",
                    "description": "Maintain applications under senior guidance.",
                    "subfield_id": "software",
                    "experience_level": "entry",
                    "salary_range": _salary(60000, 85000),
                    "required_skills": ["JavaScript", "Git"],
                    "preferred_skills": ["React"],
                    "work_environment": {
                        "remote": True,
                        "hybrid": True,
                        "onsite": False,
                        "team_size": "3-8 people",
                        "work_style": ["collaborative"],
                        "travel_requirement": "none",
                    },
                    "career_path": ["Junior Developer", "Senior Developer"],
                    "keywords": ["junior developer", "web"],
                }
            ],
            "internship_opportunities": [
                {
                    "id": "dev-intern",
                    "title": "Software Development Intern",
                    "description": "Work on real projects for a summer.",
                    "subfield_id": "software",
                    "duration": "3 months",
                    "stipend": _salary(20, 35, period="hourly"),
                    "required_skills": ["Basic Programming"],
                    "learning_outcomes": ["Version control"],
                    "typical_companies": ["Startups"],
                    "application_period": "Spring",
                    "keywords": ["internship"],
                }
            ],
            "experience_levels": [
                {
                    "level": "entry",
                    "title": "Junior Technologist",
                    "description": "Supervised work on small features.",
                    "years_of_experience": "0-2 years",
                    "typical_roles": ["Junior Developer"],
                    "salary_range": _salary(50000, 80000),
                    "key_responsibilities": ["Bug fixing"],
                    "required_skills": ["Git", "Testing"],
                    "career_progression": ["Junior", "Senior"],
                }
            ],
            "keywords": ["software", "programming", "data"],
            "industry_trends": {
                "demand": "high",
                "growth": 22,
                "competitiveness": "high",
                "emerging_roles": ["AI Engineer"],
            },
            "related_domains": ["health"],
        },
        {
            "id": "health",
            "name": "Healthcare",
            "description": "Care for patients and communities.",
            "subfields": [
                {
                    "id": "nursing",
                    "name": "Nursing",
                    "description": "Direct patient care in clinics and hospitals.",
                    "required_skills": ["Patient Care", "Anatomy"],
                    "average_salary": _salary(50000, 90000),
                    "job_roles": ["Registered Nurse"],
                    "keywords": ["nursing", "clinical"],
                }
            ],
            "keywords": ["medicine", "patient care"],
            "industry_trends": {"demand": "medium", "growth": 10, "competitiveness": "medium"},
            "related_domains": ["missing-domain"],
        },
        {
            "id": "arts",
            "name": "Arts & Design",
            "description": "Visual and performing arts.",
            "subfields": [
                {
                    "id": "graphic-design",
                    "name": "Graphic Design",
                    "description": "Visual communication for print and screen.",
                    "required_skills": ["Adobe Photoshop"],
                    "average_salary": _salary(40000, 80000),
                    "job_roles": ["Graphic Designer"],
                    "keywords": ["visual design"],
                }
            ],
            "keywords": ["design", "creative"],
            "industry_trends": {"demand": "low", "growth": 3, "competitiveness": "high"},
        },
    ]


@pytest.fixture
def store(domain_records):
    return TaxonomyStore.from_dicts(domain_records)
