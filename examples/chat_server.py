"""
Chat Server Example

Attach sender metadata to chat sessions in a FastAPI WebSocket endpoint.

Run with: uvicorn examples.chat_server:app
"""
from fastapi import Depends, WebSocket, WebSocketDisconnect

from sendermeta.api import create_app, get_sender_metadata
from sendermeta.core.config.settings import Settings
from sendermeta.core.models.sender import SenderMetadata

app = create_app(Settings())
sessions: dict[int, SenderMetadata] = {}


@app.websocket("/chat")
async def chat(websocket: WebSocket, sender: SenderMetadata = Depends(get_sender_metadata)):
    await websocket.accept()
    sessions[id(websocket)] = sender

    try:
        while True:
            text = await websocket.receive_text()
            await websocket.send_json({"text": text, "sender": sender.to_dict()})
    except WebSocketDisconnect:
        sessions.pop(id(websocket), None)
