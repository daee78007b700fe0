"""Resume prompt templates."""


PROFILE_EXTRACTION_PROMPT = """Extract the following information from this resume and return it as JSON only, no other text:
{
  "first_name": "",
  "last_name": "",
  "email": "",
  "phone": "",
  "linkedin_url": "",
  "current_title": "",
  "current_company": "",
  "years_experience": null,
  "skills": [],
  "summary": ""
}

For years_experience, estimate based on work history. Return null if cannot determine.
For skills, extract key technical and professional skills as an array.
For summary, write a 2-3 sentence professional summary.
Return ONLY valid JSON, no markdown, no explanation."""


RESUME_FORMATTING_PROMPT = """Extract and format this resume into a clean, professional format. Return ONLY the formatted resume content as HTML that can be converted to a Word document. Use proper HTML tags:

- <h1> for name
- <h2> for section headers (Summary, Experience, Education, Skills, etc.)
- <p> for paragraphs
- <ul> and <li> for bullet points
- <strong> for bold text
- <em> for italic text

Include all information from the resume. Do not add any explanations, just return the HTML content."""


PROFILE_MAX_OUTPUT_TOKENS = 2048
FORMATTING_MAX_OUTPUT_TOKENS = 4096
