"""
Option lists for the application form dropdowns.

Each list is stored as (value, English label, French label). The public
functions take a language tag: "en" gets English labels, any other tag gets
French.
"""

from typing import Callable, Dict, List, Optional

Option = Dict[str, str]

AGE_OPTIONS = [
    ("yes", "Yes", "Oui"),
    ("no", "No", "Non"),
]

COMMUNICATION_LANGUAGES = [
    ("english", "English", "Anglais"),
    ("french", "French", "Français"),
]

COOP_TERMS = [
    ("summer-2026", "Summer 2026", "Été 2026"),
    ("fall-2026", "Fall 2026", "Automne 2026"),
    ("winter-2027", "Winter 2027", "Hiver 2027"),
    ("summer-2027", "Summer 2027", "Été 2027"),
    ("other", "Other", "Autre"),
]

DIETARY_RESTRICTIONS = [
    ("none", "None", "Aucune"),
    ("vegetarian", "Vegetarian", "Végétarien"),
    ("vegan", "Vegan", "Végétalien"),
    ("glutenFree", "Gluten-Free", "Sans gluten"),
    ("halal", "Halal", "Halal"),
    ("kosher", "Kosher", "Casher"),
    ("nutAllergy", "Nut Allergy", "Allergie aux noix"),
    ("dairyFree", "Dairy-Free", "Sans produits laitiers"),
    ("other", "Other", "Autre"),
]

FACULTIES = [
    ("fine-arts", "Fine Arts", "Beaux-arts"),
    ("liberal-arts", "Liberal Arts", "Arts libéraux"),
    ("engineering", "Engineering", "Génie"),
    ("business", "Business", "Commerce"),
    ("science", "Science", "Sciences"),
    ("mathematics", "Mathematics", "Mathématiques"),
    ("other", "Other", "Autre"),
]

GENDERS = [
    ("", "Select your gender", "Sélectionnez votre genre"),
    ("male", "Male", "Homme"),
    ("female", "Female", "Femme"),
    ("other", "Other", "Autre"),
    ("would rather not say", "Would rather not say", "Préfère ne pas répondre"),
]

GRADUATION_SEMESTERS = [
    ("fall", "Fall", "Automne"),
    ("winter", "Winter", "Hiver"),
    ("summer", "Summer", "Été"),
]

JOB_ROLES = [
    ("new-grad", "New Grad", "Nouveau diplômé"),
    ("intern", "Intern", "Stagiaire"),
    ("both", "Both", "Les deux"),
    ("none", "None", "Aucun"),
]

JOB_TYPES = [
    ("software-engineer", "Software Engineer / Software Developer",
     "Ingénieur logiciel / Développeur logiciel"),
    ("data-analyst", "Data Analyst", "Analyste de données"),
    ("data-scientist", "Data Scientist", "Scientifique de données"),
    ("data-engineer", "Data Engineer", "Ingénieur de données"),
    ("cybersecurity-analyst", "Cybersecurity Analyst", "Analyste en cybersécurité"),
    ("product-owner", "Product Owner", "Propriétaire de produit"),
    ("other", "Other", "Autre"),
]

LEVEL_OF_STUDY_TYPES = [
    ("Less than Secondary / High School", "Less than Secondary / High School",
     "Moins que le secondaire"),
    ("Secondary / High School", "Secondary / High School", "Secondaire"),
    ("Undergraduate University (2 year - community college or similar)",
     "Undergraduate University (2 year - community college or similar)",
     "Université de premier cycle (2 ans - collège communautaire ou similaire)"),
    ("Undergraduate University (3+ year)", "Undergraduate University (3+ year)",
     "Université de premier cycle (3+ ans)"),
    ("Graduate University (Masters, Professional, Doctoral, etc)",
     "Graduate University (Masters, Professional, Doctoral, etc)",
     "Études supérieures (Maîtrise, Professionnel, Doctorat, etc.)"),
    ("Code School / Bootcamp", "Code School / Bootcamp", "École de code / Bootcamp"),
    ("Other Vocational / Trade Program or Apprenticeship",
     "Other Vocational / Trade Program or Apprenticeship",
     "Autre programme professionnel ou apprentissage"),
    ("Post Doctorate", "Post Doctorate", "Post-doctorat"),
    ("other", "Other", "Autre"),
    ("I'm not currently a student", "I'm not currently a student",
     "Je ne suis pas actuellement étudiant"),
    ("Prefer not to answer", "Prefer not to answer", "Préfère ne pas répondre"),
]

PROGRAMS = [
    ("computer-science", "Computer Science", "Informatique"),
    ("software-engineering", "Software Engineering", "Génie logiciel"),
    ("computer-engineering", "Computer Engineering", "Génie informatique"),
    ("electrical-engineering", "Electrical Engineering", "Génie électrique"),
    ("other", "Other", "Autre"),
]

PRONOUNS = [
    ("", "Select your pronouns", "Sélectionnez vos pronoms"),
    ("he/him", "He/Him", "Il/Lui"),
    ("she/her", "She/Her", "Elle"),
    ("they/them", "They/Them", "Iel/Ellui"),
    ("would rather not say", "Would rather not say", "Préfère ne pas répondre"),
]

TSHIRT_SIZES = [
    ("S", "S", "S"),
    ("M", "M", "M"),
    ("L", "L", "L"),
    ("XL", "XL", "XL"),
]

UNDERREPRESENTED_GROUPS = [
    ("Yes", "Yes", "Oui"),
    ("No", "No", "Non"),
    ("Unsure", "Unsure", "Incertain"),
]

WORK_REGIONS = [
    ("quebec", "Quebec", "Québec"),
    ("ontario", "Ontario", "Ontario"),
    ("british-columbia", "British Columbia", "Colombie-Britannique"),
    ("rest-of-canada", "Rest of Canada", "Reste du Canada"),
    ("new-york", "New York", "New York"),
    ("california", "California", "Californie"),
    ("washington-state", "Washington State", "État de Washington"),
    ("rest-of-usa", "Rest of USA", "Reste des États-Unis"),
    ("other", "Other", "Autre"),
]

WORKING_LANGUAGES = [
    ("english", "English", "Anglais"),
    ("french", "French", "Français"),
    ("other", "Other", "Autre"),
]

# Applicant-facing status descriptions, in display order
STATUSES = [
    {
        "name": "Unverified",
        "title": "Email Not Verified",
        "description": "Your email address is not verified. Please verify your email to proceed.",
        "backgroundColor": "#171717",
    },
    {
        "name": "Incomplete",
        "title": "Profile Incomplete",
        "description": "Please fill the application form to complete your registration profile.",
        "backgroundColor": "crimson",
    },
    {
        "name": "Submitted",
        "title": "Application Submitted",
        "description": "Your application has been submitted and is awaiting review.",
        "backgroundColor": "darkblue",
    },
    {
        "name": "Admitted",
        "title": "Admitted to Hackathon",
        "description": "Congratulations! You have been admitted to the hackathon. "
                       "Please confirm your attendance on the dashboard.",
        "backgroundColor": "seagreen",
    },
    {
        "name": "Refused",
        "title": "Application Refused",
        "description": "We regret to inform you that your application has been refused. "
                       "Thank you for your interest.",
        "backgroundColor": "orangered",
    },
    {
        "name": "Waitlisted",
        "title": "Application Waitlisted",
        "description": "Your application has been waitlisted. You will be notified if a spot becomes available.",
        "backgroundColor": "dimgray",
    },
    {
        "name": "Not confirmed",
        "title": "Attendance Not Confirmed",
        "description": "You have not yet confirmed your attendance. "
                       "Please confirm your attendance by clicking the attending button.",
        "backgroundColor": "#590059",
    },
    {
        "name": "Confirmed",
        "title": "Attendance Confirmed",
        "description": "You have confirmed your attendance. We look forward to seeing you at the hackathon!",
        "backgroundColor": "darkgreen",
    },
    {
        "name": "Declined",
        "title": "Attendance Declined",
        "description": "You have declined your attendance. We hope to see you in future events. "
                       "If you are currently in a team please inform your team members.",
        "backgroundColor": "red",
    },
    {
        "name": "Checked-In",
        "title": "Checked-In for Hackathon",
        "description": "You have successfully checked in for the hackathon. Get ready for an exciting event!",
        "backgroundColor": "darkslategrey",
    },
]


def _options(entries, lang: str) -> List[Option]:
    return [
        {"value": value, "label": english if lang == "en" else french}
        for value, english, french in entries
    ]


def age_options(lang: str = "en") -> List[Option]:
    return _options(AGE_OPTIONS, lang)


def communication_languages(lang: str = "en") -> List[Option]:
    return _options(COMMUNICATION_LANGUAGES, lang)


def coop_terms(lang: str = "en") -> List[Option]:
    return _options(COOP_TERMS, lang)


def dietary_restrictions(lang: str = "en") -> List[Option]:
    return _options(DIETARY_RESTRICTIONS, lang)


def faculties(lang: str = "en") -> List[Option]:
    return _options(FACULTIES, lang)


def genders(lang: str = "en") -> List[Option]:
    return _options(GENDERS, lang)


def graduation_semesters(lang: str = "en") -> List[Option]:
    return _options(GRADUATION_SEMESTERS, lang)


def job_roles(lang: str = "en") -> List[Option]:
    return _options(JOB_ROLES, lang)


def job_types(lang: str = "en") -> List[Option]:
    return _options(JOB_TYPES, lang)


def level_of_study_types(lang: str = "en") -> List[Option]:
    return _options(LEVEL_OF_STUDY_TYPES, lang)


def programs(lang: str = "en") -> List[Option]:
    return _options(PROGRAMS, lang)


def pronouns(lang: str = "en") -> List[Option]:
    return _options(PRONOUNS, lang)


def tshirt_sizes(lang: str = "en") -> List[Option]:
    return _options(TSHIRT_SIZES, lang)


def underrepresented_groups(lang: str = "en") -> List[Option]:
    return _options(UNDERREPRESENTED_GROUPS, lang)


def work_regions(lang: str = "en") -> List[Option]:
    return _options(WORK_REGIONS, lang)


def working_languages(lang: str = "en") -> List[Option]:
    return _options(WORKING_LANGUAGES, lang)


LOOKUPS: Dict[str, Callable[[str], List[Option]]] = {
    "ageOptions": age_options,
    "communicationLanguages": communication_languages,
    "coopTerms": coop_terms,
    "dietaryRestrictions": dietary_restrictions,
    "faculties": faculties,
    "genders": genders,
    "graduationSemesters": graduation_semesters,
    "jobRoles": job_roles,
    "jobTypes": job_types,
    "levelOfStudyTypes": level_of_study_types,
    "programs": programs,
    "pronouns": pronouns,
    "tshirtSizes": tshirt_sizes,
    "underrepresentedGroups": underrepresented_groups,
    "workRegions": work_regions,
    "workingLanguages": working_languages,
}


def get_lookup(name: str, lang: str = "en") -> Optional[List[Option]]:
    lookup = LOOKUPS.get(name)
    return lookup(lang) if lookup else None
