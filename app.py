"""Development server for the blog.

Session cookies are sent with ``Secure``, so browsers only return them over HTTPS
(localhost excepted).
"""

from blogapp import create_app

app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
