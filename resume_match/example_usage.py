"""
Example usage of the rule-based resume/job compatibility engine.

Run this file to see the system in action:
    python -m resume_match.example_usage
"""

from resume_match import JobRequirement, analyze, analyze_multiple_jobs, parse_resume
from resume_match.config import configure_logging

# Sample job description
JOB_DESCRIPTION = """
Full Stack Developer - Platform Team

Acme Labs is hiring a Full Stack Developer to build customer-facing web apps.

Requirements:
- 3+ years of experience with JavaScript and React
- Solid Python and SQL knowledge
- Experience with Docker and AWS
- Bachelor's degree in Computer Science or related field

Nice to have: Kubernetes, GraphQL, agile delivery
"""

# Sample resume
RESUME = """
Jordan Lee
Email: jordan.lee@example.com | Phone: +1 555 0100

TECHNICAL SKILLS
JavaScript, React, Node.js, Python, Django, PostgreSQL, Docker, Git

WORK EXPERIENCE
Software Engineer | Brightside | Jan 2020 - Present
5 years experience building web apps
Junior Developer | Northwind | 06/2018 - 12/2019

EDUCATION
Bachelor of Science in Computer Science
State University, 2014 - 2018

CERTIFICATIONS
AWS Certified Developer - Associate
Certified Scrum Master

PROJECTS
Open-source contributions to form validation libraries
"""


def example_basic_matching():
    """Example 1: Parse a resume and score it against one job."""
    print("\n" + "="*80)
    print("EXAMPLE 1: Basic Matching")
    print("="*80)

    resume = parse_resume(RESUME.encode("utf-8"), "text/plain")
    requirement = JobRequirement.from_description(JOB_DESCRIPTION)
    report = analyze(resume, requirement.description, requirement.required_skills)

    print(f"\nOverall Match: {report.overall_score}%")
    print(f"\nComponent Breakdown:")
    for component, score in [
        ("skills", report.skills_score),
        ("experience", report.experience_score),
        ("education", report.education_score),
    ]:
        bar = "█" * int(score / 5)
        print(f"  {component.capitalize():15} {score:5d}% {bar}")

    print(f"\nRequired Skills: {', '.join(requirement.required_skills)}")
    print(f"Resume Skills: {', '.join(resume.skills)}")
    print(f"Missing Skills: {', '.join(report.missing_skills) or 'none'}")
    print(f"\nRecommendations:")
    for recommendation in report.recommendations:
        print(f"  - {recommendation}")

    print(f"{'='*80}\n")
    return report


def example_multiple_jobs():
    """Example 2: Match against multiple jobs."""
    print("\n" + "="*80)
    print("EXAMPLE 2: Multiple Job Matching")
    print("="*80)

    resume = parse_resume(RESUME.encode("utf-8"), "text/plain")
    jobs = [
        JobRequirement.from_description(JOB_DESCRIPTION),
        JobRequirement.from_description(JOB_DESCRIPTION.replace("3+ years", "8+ years")),
        JobRequirement.from_description(
            JOB_DESCRIPTION.replace("Bachelor's degree", "PhD"),
            ["Java", "Spring", "Kubernetes"],
        ),
    ]

    results = analyze_multiple_jobs(resume, jobs)

    print(f"\nRESULTS (Sorted by Match %)")
    for rank, (index, report) in enumerate(results, 1):
        print(f"\n#{rank} - Job {index} - Match: {report.overall_score}%")
        print(f"  Breakdown: Skills={report.skills_score}%, "
              f"Exp={report.experience_score}%, "
              f"Edu={report.education_score}%")

    print(f"{'='*80}\n")
    return results


def main():
    """Run all examples."""
    configure_logging()

    print("\n" + "="*80)
    print("RESUME/JOB COMPATIBILITY ENGINE - EXAMPLES")
    print("="*80)

    example_basic_matching()
    example_multiple_jobs()

    print("\n" + "="*80)
    print("ALL EXAMPLES COMPLETED SUCCESSFULLY")
    print("="*80)


if __name__ == "__main__":
    main()
