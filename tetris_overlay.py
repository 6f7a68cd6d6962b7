
import pygame

class GameOverOverlay:
    def __init__(self, text="GAME OVER", alpha=191):
        self.text=text
        self.alpha=alpha
        self._surf=None

    def draw(self,screen,font,rect):
        rect=pygame.Rect(rect)
        if self._surf is None or self._surf.get_size()!=rect.size:
            self._surf=pygame.Surface(rect.size,pygame.SRCALPHA)
            self._surf.fill((0,0,0,self.alpha))
        screen.blit(self._surf,rect.topleft)
        msg=font.render(self.text,True,(255,255,255))
        screen.blit(msg,msg.get_rect(center=rect.center))
