# main.py
from flask import Flask, request, redirect, render_template_string
import logging, os
from urllib.parse import urlsplit

from calculators import (InvalidInput, compute_bmi, compute_sleep_hours,
                         gauge_segments, parse_time_of_day)
from content import ABOUT, ARTICLES, FAQS, NAV_ITEMS, TELEGRAM_WIDGET_SRC
import contact
from theme import COOKIE_MAX_AGE, COOKIE_NAME, ThemePreference, cookie_value

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config.setdefault("CONTACT_DELIVERY", contact.log_delivery)
app.config.setdefault("TELEGRAM_BOT", os.environ.get("TELEGRAM_BOT", "YourTelegramBot"))

CALCULATOR_PAGES = ("home", "tools")

PAGE = """
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Vitality Source{% if title %} · {{ title }}{% endif %}</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link href="https://fonts.googleapis.com/css2?family=Montserrat:wght@600;700&family=Open+Sans&display=swap" rel="stylesheet">
  <style>
    :root {
      --body: {{ theme.palette.body }};
      --text: {{ theme.palette.text }};
      --accent: {{ theme.palette.accent }};
      --background: {{ theme.palette.background }};
      --danger: #e05252;
    }
    * { box-sizing: border-box; }
    body {
      margin: 0; padding: 0;
      background: var(--body);
      color: var(--text);
      font-family: 'Open Sans', sans-serif;
      transition: all 0.3s ease;
    }
    h1,h2,h3,h4,h5,h6 { font-family: 'Montserrat', sans-serif; }
    a { color: var(--accent); text-decoration: none; }
    input, textarea, button { font-family: inherit; }
    nav { display: flex; padding: 1rem; justify-content: space-between; align-items: center; }
    nav .links { display: flex; gap: 1rem; align-items: center; }
    nav .links a { transition: transform 0.2s; display: inline-block; }
    nav .links a:hover { transform: scale(1.1); }
    nav form { margin: 0; }
    .toggle { border: none; background: transparent; cursor: pointer; font-size: 1.2rem; padding: 0; }
    main { max-width: 960px; margin: 0 auto; padding: 0 1rem 2rem; }
    .hero { padding: 2rem 0; }
    .card { padding: 1rem; border-radius: 8px; background: var(--background); box-shadow: 0 2px 6px rgba(0,0,0,0.1); margin: 1rem 0; transition: transform 0.2s; }
    .card:hover { transform: scale(1.02); }
    button.primary { padding: 0.5rem 1rem; border: none; border-radius: 4px; background: var(--accent); color: #fff; cursor: pointer; }
    input, textarea { padding: 0.5rem; margin: 0.25rem 0.5rem 0.25rem 0; border-radius: 4px; border: 1px solid #9993; background: var(--body); color: var(--text); }
    textarea { width: 100%; min-height: 6rem; }
    .err { color: var(--danger); }
    .ok { color: var(--accent); }
    .gauge {
      width: 140px; height: 140px; border-radius: 50%; margin-top: 1rem;
      background: conic-gradient(var(--accent) {{ '%.1f' % (bmi.ratio * 360) if bmi else 0 }}deg, #9994 0);
      display: flex; align-items: center; justify-content: center;
    }
    .gauge span { width: 70%; height: 70%; border-radius: 50%; background: var(--background); display: flex; align-items: center; justify-content: center; font-weight: 700; }
    details { margin: 0.5rem 0; }
    footer { text-align: center; padding: 1.5rem; opacity: 0.7; }
  </style>
</head>
<body class="{{ 'dark' if theme.dark_mode else 'light' }}">
  <nav>
    <a href="/" class="logo"><strong>Vitality Source</strong></a>
    <div class="links">
      {% for label, path in nav_items %}<a href="{{ path }}">{{ label }}</a>{% endfor %}
      <form method="POST" action="/theme">
        <input type="hidden" name="next" value="{{ request.path }}">
        <button type="submit" class="toggle" title="Toggle theme">{{ theme.icon }}</button>
      </form>
    </div>
  </nav>

  {% macro bmi_calculator(page) %}
    <div class="card">
      <h3>BMI Calculator</h3>
      <form method="POST" action="/bmi">
        <input type="hidden" name="page" value="{{ page }}">
        <input type="number" name="height" step="0.1" placeholder="Height cm" required value="{{ bmi_form.height }}">
        <input type="number" name="weight" step="0.1" placeholder="Weight kg" required value="{{ bmi_form.weight }}">
        <button type="submit" class="primary">Calculate</button>
      </form>
      {% if bmi_error %}<p class="err">{{ bmi_error }}</p>{% endif %}
      {% if bmi %}
        <div class="gauge" data-segments="{{ bmi_segments|join(',') }}"><span>{{ '%.1f' % bmi.value }}</span></div>
        <p>Your BMI is <strong>{{ '%.1f' % bmi.value }}</strong></p>
      {% endif %}
    </div>
  {% endmacro %}

  {% macro sleep_calculator(page) %}
    <div class="card">
      <h3>Sleep Calculator</h3>
      <form method="POST" action="/sleep">
        <input type="hidden" name="page" value="{{ page }}">
        <input type="time" name="bed" required value="{{ sleep_form.bed }}">
        <input type="time" name="wake" required value="{{ sleep_form.wake }}">
        <button type="submit" class="primary">Calculate</button>
      </form>
      {% if sleep_error %}<p class="err">{{ sleep_error }}</p>{% endif %}
      {% if sleep %}<p>You sleep {{ '%.1f' % sleep.hours }} hours</p>{% endif %}
    </div>
  {% endmacro %}

  <main>
  {% if page == 'home' %}
    <section class="hero">
      <h1>Vitality Source</h1>
      <p>Your hub for biohacking &amp; supplements</p>
    </section>
    <section>{{ bmi_calculator('home') }}</section>
    <section>{{ sleep_calculator('home') }}</section>
    <section>
      <div id="telegram-embed">
        <script async src="{{ telegram_src }}" data-telegram-login="{{ telegram_bot }}" data-size="large"></script>
      </div>
    </section>

  {% elif page == 'blog' %}
    {% for a in articles %}
      <div class="card">
        <h4>{{ a.title }}</h4>
        <small>{{ a.date }}</small>
        <p>{{ a.excerpt }}</p>
        <a href="#">Read more</a>
      </div>
    {% endfor %}

  {% elif page == 'tools' %}
    {{ bmi_calculator('tools') }}
    {{ sleep_calculator('tools') }}

  {% elif page == 'knowledge' %}
    <h2>Knowledge Base</h2>
    <h3>FAQ</h3>
    {% for q, a in faqs %}<details><summary>{{ q }}</summary><p>{{ a }}</p></details>{% endfor %}

  {% elif page == 'contacts' %}
    <h2>Contacts</h2>
    {% if submitted %}<p class="ok">Submitted!</p>{% endif %}
    <form method="POST" action="/contacts" novalidate>
      <input name="name" placeholder="Name" value="{{ contact_form.name }}">
      {% if contact_errors.name %}<small class="err">{{ contact_errors.name }}</small>{% endif %}
      <br>
      <input name="email" placeholder="Email" value="{{ contact_form.email }}">
      {% if contact_errors.email %}<small class="err">{{ contact_errors.email }}</small>{% endif %}
      <br>
      <textarea name="message" placeholder="Message">{{ contact_form.message }}</textarea>
      {% if contact_errors.message %}<small class="err">{{ contact_errors.message }}</small>{% endif %}
      <br>
      <button type="submit" class="primary">Send</button>
    </form>

  {% elif page == 'about' %}
    <h2>About Us</h2>
    <p>{{ about }}</p>
  {% endif %}
  </main>

  <footer>&copy; Vitality Source</footer>
</body>
</html>
"""

TITLES = {"home": "", "blog": "Blog", "tools": "Tools", "knowledge": "Knowledge Base",
          "contacts": "Contacts", "about": "About"}


def current_theme():
    # read-only view; toggling goes through /theme so the cookie gets written
    return ThemePreference(load=lambda: request.cookies.get(COOKIE_NAME), save=lambda flag: None)


def render(page, **ctx):
    ctx.setdefault("bmi", None)
    ctx.setdefault("bmi_error", None)
    ctx.setdefault("bmi_form", {"height": "", "weight": ""})
    ctx.setdefault("sleep", None)
    ctx.setdefault("sleep_error", None)
    ctx.setdefault("sleep_form", {"bed": "", "wake": ""})
    ctx.setdefault("contact_form", {"name": "", "email": "", "message": ""})
    ctx.setdefault("contact_errors", {})
    ctx.setdefault("submitted", False)
    html = render_template_string(
        PAGE, page=page, title=TITLES[page], theme=current_theme(), nav_items=NAV_ITEMS,
        articles=ARTICLES, faqs=FAQS, about=ABOUT,
        telegram_src=TELEGRAM_WIDGET_SRC, telegram_bot=app.config["TELEGRAM_BOT"], **ctx)
    return html


def calculator_page():
    page = request.form.get("page", "")
    return page if page in CALCULATOR_PAGES else "tools"


def safe_next(target):
    # same-site paths only; browsers treat a backslash like "/", so "/\host" is protocol-relative
    if not target or not target.startswith("/"):
        return "/"
    parts = urlsplit(target.replace("\\", "/"))
    if parts.scheme or parts.netloc or target[1:2] in ("/", "\\"):
        return "/"
    return target


# -------- Static pages --------
@app.route("/")
def home():
    return render("home")

@app.route("/blog")
def blog():
    return render("blog")

@app.route("/tools")
def tools():
    return render("tools")

@app.route("/knowledge")
def knowledge():
    return render("knowledge")

@app.route("/about")
def about():
    return render("about")


# -------- Calculators --------
@app.route("/bmi", methods=["POST"])
def bmi():
    form = {"height": request.form.get("height", ""), "weight": request.form.get("weight", "")}
    page = calculator_page()
    try:
        result = compute_bmi(form["height"], form["weight"])
    except InvalidInput as e:
        logger.info("bmi rejected: %s", e)
        return render(page, bmi_form=form, bmi_error=str(e))
    return render(page, bmi_form=form, bmi=result, bmi_segments=gauge_segments(result))

@app.route("/sleep", methods=["POST"])
def sleep():
    form = {"bed": request.form.get("bed", ""), "wake": request.form.get("wake", "")}
    page = calculator_page()
    try:
        bed_h, bed_m = parse_time_of_day(form["bed"])
        wake_h, wake_m = parse_time_of_day(form["wake"])
        result = compute_sleep_hours(bed_h, bed_m, wake_h, wake_m)
    except InvalidInput as e:
        logger.info("sleep rejected: %s", e)
        return render(page, sleep_form=form, sleep_error=str(e))
    return render(page, sleep_form=form, sleep=result)


# -------- Contact --------
@app.route("/contacts", methods=["GET", "POST"])
def contacts():
    if request.method == "GET":
        return render("contacts")

    form = {key: request.form.get(key, "") for key in contact.FIELDS}
    errors = contact.submit(form, app.config["CONTACT_DELIVERY"])
    if errors:
        return render("contacts", contact_form=form, contact_errors=errors)
    return render("contacts", submitted=True)


# -------- Theme --------
@app.route("/theme", methods=["POST"])
def toggle_theme():
    resp = redirect(safe_next(request.form.get("next")))

    def save(flag):
        resp.set_cookie(COOKIE_NAME, cookie_value(flag), max_age=COOKIE_MAX_AGE, samesite="Lax")

    ThemePreference(load=lambda: request.cookies.get(COOKIE_NAME), save=save).toggle()
    return resp


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    port = int(os.environ.get("PORT", 8080))
    app.run(host="0.0.0.0", port=port)
