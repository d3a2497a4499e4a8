from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["widget"])

# Browser client: asks for a presigned PUT, then sends the file straight to the store.
UPLOAD_PAGE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8" />
    <title>Upload Files to Cloudflare R2</title>
    <style>
      body { font-family: sans-serif; padding: 40px; max-width: 600px; margin: 0 auto; }
      .form-group { margin-bottom: 20px; }
      .progress { width: 100%; height: 20px; background-color: #f0f0f0; border-radius: 10px; overflow: hidden; margin: 10px 0; }
      .progress-bar { height: 100%; background-color: #4CAF50; width: 0%; transition: width 0.3s; }
      .status { margin-top: 10px; padding: 10px; border-radius: 5px; }
      .success { background-color: #d4edda; color: #155724; border: 1px solid #c3e6cb; }
      .error { background-color: #f8d7da; color: #721c24; border: 1px solid #f5c6cb; }
      .info { background-color: #d1ecf1; color: #0c5460; border: 1px solid #bee5eb; }
    </style>
  </head>
  <body>
    <h2>Upload Files to Cloudflare R2</h2>
    <div class="form-group">
      <input type="file" id="fileInput" required />
    </div>
    <div class="form-group">
      <button onclick="uploadFile()" id="uploadBtn">Upload</button>
    </div>
    <div class="progress" id="progressContainer" style="display: none;">
      <div class="progress-bar" id="progressBar"></div>
    </div>
    <div id="status"></div>

    <script>
      function showStatus(message, type) {
        const status = document.getElementById('status');
        status.innerHTML = message;
        status.className = 'status ' + type;
      }

      function putFile(url, file, onProgress) {
        return new Promise((resolve, reject) => {
          const xhr = new XMLHttpRequest();
          xhr.upload.addEventListener('progress', (e) => {
            if (e.lengthComputable) {
              onProgress((e.loaded / e.total) * 100);
            }
          });
          xhr.addEventListener('load', () => {
            if (xhr.status >= 200 && xhr.status < 300) {
              resolve();
            } else {
              reject(new Error('Upload failed with status: ' + xhr.status));
            }
          });
          xhr.addEventListener('error', () => reject(new Error('Upload failed')));
          xhr.open('PUT', url);
          xhr.setRequestHeader('Content-Type', file.type || 'application/octet-stream');
          xhr.send(file);
        });
      }

      async function uploadFile() {
        const fileInput = document.getElementById('fileInput');
        const uploadBtn = document.getElementById('uploadBtn');
        const progressContainer = document.getElementById('progressContainer');
        const progressBar = document.getElementById('progressBar');

        const file = fileInput.files[0];
        if (!file) {
          showStatus('Please select a file', 'error');
          return;
        }

        try {
          uploadBtn.disabled = true;
          showStatus('Generating upload URL...', 'info');

          const urlResponse = await fetch('/generate-upload-url', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ filename: file.name, contentType: file.type })
          });
          const urlData = await urlResponse.json();
          if (!urlData.success) {
            throw new Error(urlData.error);
          }

          showStatus('Uploading file...', 'info');
          progressBar.style.width = '0%';
          progressContainer.style.display = 'block';

          await putFile(urlData.presignedUrl, file, (percent) => {
            progressBar.style.width = percent + '%';
          });

          const link = document.createElement('a');
          link.href = urlData.publicUrl;
          link.target = '_blank';
          link.textContent = urlData.publicUrl;
          showStatus('Upload successful! File URL: ', 'success');
          document.getElementById('status').appendChild(link);
        } catch (error) {
          console.error('Upload error:', error);
          showStatus('Upload failed: ' + error.message, 'error');
        } finally {
          progressContainer.style.display = 'none';
          uploadBtn.disabled = false;
        }
      }
    </script>
  </body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def upload_page() -> HTMLResponse:
    return HTMLResponse(UPLOAD_PAGE)
