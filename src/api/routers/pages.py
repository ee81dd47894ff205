from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["pages"])

# Longest image edge sent to the server; bigger photos are downscaled in the browser
MAX_IMAGE_EDGE = 2000


@router.get("/", response_class=HTMLResponse)
async def home():
    return """
    <html>
        <head><meta charset="utf-8"><title>OCR para facturas</title></head>
        <body style="font-family: Arial; text-align: center; padding: 50px;">
            <h1>OCR para facturas con IA</h1>
            <p>¿Estás listo para comenzar?</p>
            <a href="/ocr" style="padding: 12px 24px; background: #2563eb; color: white;
               border-radius: 8px; text-decoration: none;">Empezar</a>
        </body>
    </html>
    """


@router.get("/ocr", response_class=HTMLResponse)
async def ocr_page():
    return f"""
    <html>
        <head><meta charset="utf-8"><title>OCR para Documentos</title></head>
        <body style="font-family: Arial; max-width: 640px; margin: 0 auto; padding: 24px;">
            <h1>OCR para Documentos</h1>
            <form id="ocr-form">
                <label>Sube tu imagen (factura/recibo)</label><br>
                <input type="file" id="image" accept="image/*"><br><br>
                <label>Estrategia</label>
                <select id="strategy">
                    <option value="regex">Reglas (regex)</option>
                    <option value="ai">IA</option>
                    <option value="both">Ambas</option>
                </select><br><br>
                <button type="submit" id="submit">Extraer Texto</button>
            </form>
            <div id="error" style="color: #b91c1c; margin-top: 16px;"></div>
            <pre id="result" style="white-space: pre-wrap; background: #f9fafb; padding: 16px;"></pre>
            <script>
            const MAX_EDGE = {MAX_IMAGE_EDGE};

            function downscale(file) {{
                return new Promise((resolve) => {{
                    const img = new Image();
                    img.onload = () => {{
                        const scale = Math.min(1, MAX_EDGE / Math.max(img.width, img.height));
                        if (scale === 1) {{ resolve(file); return; }}
                        const canvas = document.createElement('canvas');
                        canvas.width = Math.round(img.width * scale);
                        canvas.height = Math.round(img.height * scale);
                        canvas.getContext('2d').drawImage(img, 0, 0, canvas.width, canvas.height);
                        canvas.toBlob((blob) => resolve(blob || file), 'image/jpeg', 0.92);
                    }};
                    img.onerror = () => resolve(file);
                    img.src = URL.createObjectURL(file);
                }});
            }}

            document.getElementById('ocr-form').addEventListener('submit', async (e) => {{
                e.preventDefault();
                const file = document.getElementById('image').files[0];
                const error = document.getElementById('error');
                const result = document.getElementById('result');
                const button = document.getElementById('submit');
                error.textContent = '';
                result.textContent = '';
                if (!file) {{ error.textContent = 'Por favor sube una imagen'; return; }}

                button.disabled = true;
                button.textContent = 'Procesando...';
                try {{
                    const formData = new FormData();
                    formData.append('image', await downscale(file), file.name);
                    formData.append('strategy', document.getElementById('strategy').value);
                    const res = await fetch('/api/ocr', {{ method: 'POST', body: formData }});
                    if (!res.ok) throw new Error('Error en el servidor');
                    const {{ raw, extraido, ia }} = await res.json();
                    let text = 'Texto crudo:\\n' + raw;
                    if (extraido) text += '\\n\\nDatos extraídos:\\n' + JSON.stringify(extraido, null, 2);
                    if (ia) text += '\\n\\nResultado IA:\\n' + (ia.text || ia.error || ia.status);
                    result.textContent = text;
                }} catch (err) {{
                    error.textContent = 'Error al procesar. ¿La imagen es clara y está bien enfocada?';
                    console.error(err);
                }} finally {{
                    button.disabled = false;
                    button.textContent = 'Extraer Texto';
                }}
            }});
            </script>
        </body>
    </html>
    """
