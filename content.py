# content.py
# Static copy for the informational pages.

NAV_ITEMS = [
    ("Home", "/"),
    ("Blog", "/blog"),
    ("Tools", "/tools"),
    ("Knowledge", "/knowledge"),
    ("Contacts", "/contacts"),
    ("About", "/about"),
]

ARTICLES = [
    {"title": "Boost Your Immunity with Vitamin D",
     "excerpt": "Learn how Vitamin D supports immune health...",
     "date": "2025-07-01"},
    {"title": "Optimizing Sleep Cycles",
     "excerpt": "Deep dive into sleep stages and biohacks...",
     "date": "2025-06-20"},
    {"title": "Top 5 Nootropics Reviewed",
     "excerpt": "Our picks for cognitive enhancement supplements...",
     "date": "2025-05-15"},
]

FAQS = [
    ("What is biohacking?", "Optimizing health with science."),
    ("How to calculate BMI?", "Use weight/(height^2)."),
    ("What are supplements?", "Vitamins, minerals and more."),
    ("Is sleep important?", "Crucial for recovery."),
    ("How to contact support?", "Use our contact form."),
]

ABOUT = "Vitality Source was established in 2025 to empower health enthusiasts..."

TELEGRAM_WIDGET_SRC = "https://telegram.org/js/telegram-widget.js?15"
