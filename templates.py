"""
Jinja2 templates for the portfolio pages.
"""

BASE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{% block title %}{% endblock %}</title>
    <style>
        body { font-family: Arial, sans-serif; background-color: #f5f5f5; margin: 0; padding: 20px; }
        h1 { color: #333; text-align: center; }
        {% block style %}{% endblock %}
    </style>
</head>
<body>
{% block body %}{% endblock %}
</body>
</html>
"""

HOME_TEMPLATE = """{% extends "base.html" %}
{% block title %}Aum's GitHub Projects{% endblock %}
{% block style %}
        .repo-container { display: flex; flex-wrap: wrap; justify-content: center; }
        .repo-card {
            background-color: #fff;
            border: 1px solid #ddd;
            border-radius: 8px;
            padding: 16px;
            margin: 10px;
            width: 300px;
            box-shadow: 0 2px 5px rgba(0, 0, 0, 0.1);
            transition: box-shadow 0.3s ease-in-out;
        }
        .repo-card:hover { box-shadow: 0 4px 10px rgba(0, 0, 0, 0.2); }
        .repo-card h2 { font-size: 18px; margin-bottom: 10px; }
        .repo-card p { font-size: 14px; color: #555; }
        .repo-card a { color: #0366d6; text-decoration: none; }
        .repo-card a:hover { text-decoration: underline; }
        .stars { font-size: 14px; color: #666; display: flex; align-items: center; margin-bottom: 10px; }
        .stars svg { margin-right: 5px; }
        .about-link { text-align: center; margin-top: 20px; }
        .about-link a { font-size: 16px; color: #0366d6; text-decoration: none; }
        .about-link a:hover { text-decoration: underline; }
{% endblock %}
{% block body %}
    <h1>Aum's GitHub Projects</h1>
    <div class="repo-container">
    {% for repo in repos %}
        <div class="repo-card">
            <h2><a href="{{ repo.url | safe_url }}">{{ repo.name }}</a></h2>
            <div class="stars">
                <svg height="16" width="16" viewBox="0 0 16 16" aria-hidden="true"><path fill="#666" d="M8 .25a.75.75 0 01.673.418l1.86 3.766 4.153.603a.75.75 0 01.416 1.28l-3.003 2.927.709 4.137a.75.75 0 01-1.088.791L8 12.347l-3.71 1.95a.75.75 0 01-1.088-.79l.709-4.137L.907 6.317a.75.75 0 01.416-1.28l4.153-.603L7.327.668A.75.75 0 018 .25z"></path></svg>
                {{ repo.stars }} stars
            </div>
            {% if repo.description %}
            <p>{{ repo.description }}</p>
            {% endif %}
        </div>
    {% endfor %}
    </div>
    <div class="about-link">
        <a href="/about">Learn more about Aum Patel</a>
    </div>
{% endblock %}
"""

ABOUT_TEMPLATE = """{% extends "base.html" %}
{% block title %}About Aum Patel{% endblock %}
{% block style %}
        .about-section { max-width: 800px; margin: auto; background-color: #fff; padding: 20px; border-radius: 8px; box-shadow: 0 2px 5px rgba(0, 0, 0, 0.1); }
        p { font-size: 16px; color: #555; }
{% endblock %}
{% block body %}
    <div class="about-section">
        <h1>About Aum Patel</h1>
        <p>
            I am a 2024 Computer Science graduate with Certified Kubernetes Administrator (CKA) and Certified Penetration Tester (EJPTv2) certifications.
            With 6 months of hands-on DevOps experience, I specialize in containerization, cloud platforms (AWS, Azure), cybersecurity, and CI/CD practices.
            I am proficient in Docker, Kubernetes, Terraform, and more.
        </p>
        <p>
            I have a strong foundation in infrastructure automation and security best practices, with experience working on on-premises bank servers, improving security measures, and automating security checks.
            I am passionate about combining practical knowledge and fresh perspectives in cloud-native solutions.
        </p>
        <p><strong>Certifications:</strong></p>
        <ul>
        {% for cert in certifications %}
            <li>{{ cert }}</li>
        {% endfor %}
        </ul>
        <p><a href="/">Back to projects</a></p>
    </div>
{% endblock %}
"""

CERTIFICATIONS = [
    "Certified Kubernetes Administrator (CKA) - Linux Foundation",
    "Certified Penetration Tester (EJPTv2) - INE (eLearnSecurity)",
    "AWS Academy Cloud Security",
    "Database Management System - NPTEL",
    "Salesforce Developer Virtual Internship",
]

TEMPLATES = {
    "base.html": BASE_TEMPLATE,
    "home.html": HOME_TEMPLATE,
    "about.html": ABOUT_TEMPLATE,
}
