BUSINESS_NAME = "Pool Spartans"
TAGLINE = "Professional pool service and maintenance you can trust."
SERVICE_AREA = "Proudly serving Palm Coast and all of Flagler County, Florida."
OWNER_NAME = "Edward McLaughlin"

CORE_VALUES = [
    ("20+ Years Experience", "Serving Florida since 2002 with professional pool maintenance expertise."),
    ("Licensed & Certified", "State certified commercial pool operator with extensive training."),
    ("Reliable Service", "Consistent, on-time service with clear communication."),
    ("Family Owned", "Local family business committed to personal service and community values."),
]

# Shown when the catalogue has no active services yet
DEFAULT_SERVICES = [
    ("Weekly Pool Service", "Our comprehensive weekly service includes water testing and balancing, cleaning, equipment checks, and detailed reporting."),
    ("Bi-Weekly Service", "Perfect for pools with lower usage or those with automated systems. Includes all standard services with extended cleaning."),
    ("Equipment Repair", "Expert diagnosis and repair of all pool equipment, from pumps to heaters. We service all major brands."),
    ("Green Pool Recovery", "Specialized treatment to restore green or neglected pools to pristine condition quickly and effectively."),
]

ADDITIONAL_SERVICES = [
    ("Pressure Testing", "Identify and locate leaks in your pool system"),
    ("Vacation Service", "Extra care while you're away"),
    ("Equipment Installation", "Professional installation of new pool equipment"),
]

TESTIMONIALS = [
    {
        "name": "Sarah Johnson",
        "date": "March 2024",
        "rating": 5,
        "review": "Edward has been maintaining our pool for over 3 years now. His service is exceptional, always on time, and our pool has never looked better!",
    },
    {
        "name": "Michael Rodriguez",
        "date": "February 2024",
        "rating": 5,
        "review": "The most reliable pool service I've ever used. Professional, knowledgeable, and always goes above and beyond.",
    },
    {
        "name": "Jennifer Smith",
        "date": "January 2024",
        "rating": 5,
        "review": "After trying several pool services, we finally found Pool Spartans. Our pool is crystal clear and perfectly balanced all year round.",
    },
    {
        "name": "David Thompson",
        "date": "December 2023",
        "rating": 5,
        "review": "Outstanding service! He's always available to answer questions and provides detailed explanations of the work performed.",
    },
]
REVIEW_URL = "https://g.page/r/CR7TTiAJ9mENEAE/review"

SERVICE_REQUEST_TYPES = ["Weekly Pool Service", "Bi-Weekly Service", "Equipment Repair", "Green Pool Recovery", "Other"]
