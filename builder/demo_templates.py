"""HTML and CSS fragments for the demo generator.

Each fragment is a str.format() template; literal CSS braces are doubled.
builder/demo.py decides which fragments to use and fills them in.
"""

PAGE = """\
<div class="website-container">
{nav}
  <main class="main-content">
{hero}
{features}
{gallery}
{contact}
  </main>
{footer}
</div>
"""

NAV = """\
  <nav class="main-nav">
    <div class="nav-brand">{name}</div>
    <ul class="nav-menu">
{links}
    </ul>
  </nav>"""

LINK = '      <li><a href="#{target}">{label}</a></li>'

HERO_IMAGE = """\
      <div class="hero-image">
        <img src="{url}" alt="Hero image" />
      </div>
"""

HERO = """\
    <section class="hero">
{image}      <div class="hero-content">
        <h1>{name}</h1>
        <p class="hero-description">{description}</p>
        <button class="cta-button">Get Started</button>
      </div>
    </section>"""

FEATURES = """\
    <section class="features">
      <div class="container">
        <h2>Our Features</h2>
        <div class="feature-grid">
          <div class="feature-card">
            <h3>Professional Design</h3>
            <p>Modern and clean design that reflects your brand perfectly.</p>
          </div>
          <div class="feature-card">
            <h3>Responsive Layout</h3>
            <p>Looks great on all devices - desktop, tablet, and mobile.</p>
          </div>
          <div class="feature-card">
            <h3>Fast Performance</h3>
            <p>Optimized for speed and excellent user experience.</p>
          </div>
        </div>
      </div>
    </section>"""

GALLERY = """\
    <section class="image-gallery">
      <div class="container">
        <h2>Gallery</h2>
        <div class="gallery-grid">
{items}
        </div>
      </div>
    </section>"""

GALLERY_ITEM = """\
          <div class="gallery-item">
            <img src="{url}" alt="Gallery image {number}" loading="lazy" />
          </div>"""

CONTACT = """\
    <section class="contact">
      <div class="container">
        <h2>Contact Us</h2>
        <form class="contact-form">
          <input type="text" placeholder="Your Name" required>
          <input type="email" placeholder="Your Email" required>
          <textarea placeholder="Your Message" required></textarea>
          <button type="submit">Send Message</button>
        </form>
      </div>
    </section>"""

FOOTER = """\
  <footer class="main-footer">
    <div class="container">
      <div class="footer-content">
        <div class="footer-section">
          <h3>{name}</h3>
          <p>Thank you for visiting our website. We look forward to working with you.</p>
        </div>
        <div class="footer-section">
          <h4>Quick Links</h4>
          <ul>
{links}
          </ul>
        </div>
        <div class="footer-section">
          <h4>Contact Info</h4>
          <p>Email: info@{slug}.com</p>
          <p>Phone: {phone}</p>
        </div>
      </div>
      <div class="footer-bottom">
        <p>&copy; 2024 {name}. All rights reserved.</p>
      </div>
    </div>
  </footer>"""

FOOTER_CONTENT = "Professional footer with contact information and links for {name}"

# Applied to .hero only when a hero image is present
HERO_IMAGE_RULES = "min-height: 80vh; display: flex; align-items: center; justify-content: center;"

STYLESHEET = """\
* {{
  margin: 0;
  padding: 0;
  box-sizing: border-box;
}}

body {{
  font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
  line-height: 1.6;
  color: #333;
}}

.website-container {{
  min-height: 100vh;
  display: flex;
  flex-direction: column;
}}

.main-nav {{
  background: linear-gradient(135deg, {primary} 0%, {secondary} 100%);
  padding: 1rem 2rem;
  display: flex;
  justify-content: space-between;
  align-items: center;
  color: white;
}}

.nav-brand {{
  font-size: 1.5rem;
  font-weight: bold;
}}

.nav-menu {{
  display: flex;
  list-style: none;
  gap: 2rem;
}}

.nav-menu a {{
  color: white;
  text-decoration: none;
  transition: opacity 0.3s;
}}

.nav-menu a:hover {{
  opacity: 0.8;
}}

.main-content {{
  flex: 1;
}}

.hero {{
  background: linear-gradient(135deg, {primary} 0%, {secondary} 100%);
  color: white;
  text-align: center;
  padding: 5rem 2rem;
  position: relative;
  {hero_image_rules}
}}

.hero-image {{
  position: absolute;
  top: 0;
  left: 0;
  right: 0;
  bottom: 0;
  z-index: 1;
}}

.hero-image img {{
  width: 100%;
  height: 100%;
  object-fit: cover;
  opacity: 0.3;
}}

.hero-content {{
  position: relative;
  z-index: 2;
}}

.hero h1 {{
  font-size: 3rem;
  margin-bottom: 1rem;
}}

.hero-description {{
  font-size: 1.2rem;
  margin-bottom: 2rem;
  max-width: 600px;
  margin-left: auto;
  margin-right: auto;
}}

.cta-button {{
  background: #ff6b6b;
  color: white;
  border: none;
  padding: 1rem 2rem;
  font-size: 1.1rem;
  border-radius: 5px;
  cursor: pointer;
  transition: background 0.3s;
}}

.cta-button:hover {{
  background: #ee5a5a;
}}

.features {{
  padding: 5rem 2rem;
  background: #f8f9fa;
}}

.container {{
  max-width: 1200px;
  margin: 0 auto;
}}

.features h2 {{
  text-align: center;
  margin-bottom: 3rem;
  font-size: 2.5rem;
}}

.feature-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
  gap: 2rem;
}}

.feature-card {{
  background: white;
  padding: 2rem;
  border-radius: 10px;
  box-shadow: 0 5px 15px rgba(0,0,0,0.1);
  text-align: center;
}}

.feature-card h3 {{
  margin-bottom: 1rem;
  color: {primary};
}}

.image-gallery {{
  padding: 5rem 2rem;
  background: #f8f9fa;
}}

.image-gallery h2 {{
  text-align: center;
  margin-bottom: 3rem;
  font-size: 2.5rem;
}}

.gallery-grid {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(300px, 1fr));
  gap: 2rem;
}}

.gallery-item {{
  background: white;
  border-radius: 10px;
  overflow: hidden;
  box-shadow: 0 5px 15px rgba(0,0,0,0.1);
}}

.gallery-item img {{
  width: 100%;
  height: 250px;
  object-fit: cover;
  transition: transform 0.3s ease;
}}

.gallery-item:hover img {{
  transform: scale(1.05);
}}

.contact {{
  padding: 5rem 2rem;
}}

.contact h2 {{
  text-align: center;
  margin-bottom: 3rem;
  font-size: 2.5rem;
}}

.contact-form {{
  max-width: 600px;
  margin: 0 auto;
  display: flex;
  flex-direction: column;
  gap: 1rem;
}}

.contact-form input,
.contact-form textarea {{
  padding: 1rem;
  border: 1px solid #ddd;
  border-radius: 5px;
  font-size: 1rem;
}}

.contact-form textarea {{
  min-height: 120px;
  resize: vertical;
}}

.contact-form button {{
  background: {primary};
  color: white;
  border: none;
  padding: 1rem;
  border-radius: 5px;
  cursor: pointer;
  font-size: 1rem;
  transition: background 0.3s;
}}

.contact-form button:hover {{
  background: {secondary};
}}

.main-footer {{
  background: #2c3e50;
  color: white;
  padding: 3rem 2rem 1rem;
}}

.footer-content {{
  display: grid;
  grid-template-columns: repeat(auto-fit, minmax(250px, 1fr));
  gap: 2rem;
  margin-bottom: 2rem;
}}

.footer-section h3,
.footer-section h4 {{
  margin-bottom: 1rem;
}}

.footer-section ul {{
  list-style: none;
}}

.footer-section ul li {{
  margin-bottom: 0.5rem;
}}

.footer-section a {{
  color: #bdc3c7;
  text-decoration: none;
  transition: color 0.3s;
}}

.footer-section a:hover {{
  color: white;
}}

.footer-bottom {{
  border-top: 1px solid #34495e;
  padding-top: 1rem;
  text-align: center;
  color: #bdc3c7;
}}
"""

RESPONSIVE = """
@media (max-width: 768px) {
  .nav-menu {
    display: none;
  }

  .hero h1 {
    font-size: 2rem;
  }

  .hero-description {
    font-size: 1rem;
  }

  .feature-grid {
    grid-template-columns: 1fr;
  }
}
"""
