"""Shared sample postings for the parser tests."""

import pytest

O2F_POSTING = """🚀 We're Hiring at O2F Infosolutions!
We're looking for an experienced Talent Acquisition Specialist to join our growing team.
📍 Location: Hyderabad
🕓 Experience: 4 – 8 Years
💼 Work Mode: Work from Office

🔑 Key Responsibilities:
• Manage end-to-end IT recruitment for domestic clients
• Source candidates through job portals and referrals
• Coordinate interviews with hiring managers

🔑 Requirements:
• Strong communication and leadership skills
• Experience in contract hiring and sourcing

📩 Share your resume at hr@o2finfosolutions.com or careers@o2finfosolutions.com
"""

ENGINEER_POSTING = """🚀 We're Hiring: Senior Software Engineer
📍 Location: Hyderabad, India
💰 Salary: ₹8-15 LPA
🕓 Experience: 4-7 years
🏢 Department: IT

🎯 About the Role:
We're looking for a passionate Senior Software Engineer to join our growing technology team.

✅ Key Requirements:
• 4+ years of experience in React, Node.js
• Strong knowledge of database design
• Experience with cloud platforms
• Excellent problem-solving skills

🔧 Key Responsibilities:
• Develop and maintain scalable web applications
• Collaborate with cross-functional teams
• Code review and mentor junior developers

📧 Apply: careers@o2finfosolutions.com"""


@pytest.fixture
def o2f_posting() -> str:
    return O2F_POSTING


@pytest.fixture
def engineer_posting() -> str:
    return ENGINEER_POSTING
