"""Shared test configuration and sample CVs."""

import pytest

STRONG_CV = """\
Aoife Murphy
Contact Details
Email: aoife.murphy@example.ie
Phone: +353 87 123 4567
Location: Dublin, Ireland
linkedin.com/in/aoifemurphy
EU Citizen, eligible to work in Ireland

Professional Summary
Senior Software Engineer with 8 years of experience building cloud platforms for
multinational and SME clients in Dublin. Strong communication and leadership skills,
proactive and results-driven, with a focus on automation and testing.

Work Experience
Senior Software Engineer, Stripe, Dublin (2021 - Present)
- Led a team of 6 developers delivering microservices in Python and TypeScript on AWS
- Reduced deployment time by 40% by introducing CI/CD pipelines with Docker and Kubernetes
- Designed REST and GraphQL API services handling 2 million requests per day
- Mentored junior engineers and championed agile and scrum practices across teams

Software Developer, Accenture, Cork (2017 - 2021)
- Built React and Node.js applications for financial services clients
- Migrated legacy SQL databases to PostgreSQL and MongoDB, saving €200k per year
- Improved automated testing coverage from 55% to 90% using Java and JavaScript
- Worked with analytical stakeholders on DevOps and cloud migration roadmaps
- Delivered accessible HTML and CSS front ends used by thousands of customers daily

Education
BSc Computer Science, University College Dublin (2013 - 2017)
First Class Honours degree, final year project on distributed systems

Skills
JavaScript, TypeScript, React, Node.js, Python, Java, SQL, AWS, Azure, Git,
HTML, CSS, Docker, Kubernetes, GraphQL, REST, API design, Agile, Scrum, DevOps
Teamwork, problem-solving, collaborative, adaptable, innovative, strategic,
time management
"""

WEAK_CV = (
    "I am looking for a job. I have worked in a shop for a few years and I like "
    "working with people. Please contact me for more."
)


@pytest.fixture
def strong_cv():
    """Complete Irish tech CV: contact block, dated roles, skills and education."""
    return STRONG_CV


@pytest.fixture
def weak_cv():
    """Short free-text CV with no sections, keywords or contact details."""
    return WEAK_CV
